"""
Identifier generators: SKU, EAN-13 barcode, tracking and order numbers, slugs
"""
import random
import re
import string
import time
from typing import Optional

_SKU_ALPHABET = string.ascii_uppercase + string.digits


def _millis() -> int:
    return int(time.time() * 1000)


def _prefix(text: Optional[str], length: int = 3, fallback: str = "GEN") -> str:
    letters = re.sub(r"[^A-Za-z0-9]", "", text or "").upper()
    return (letters[:length] or fallback).ljust(length, "X")


def generate_sku(name: str, category: Optional[str] = None, rng: Optional[random.Random] = None) -> str:
    """
    SKU as CATEGORY-NAME-RANDOM, e.g. ELE-WIR-7K2Q9D

    Uniqueness is not guaranteed here; callers check the catalog.
    """
    rng = rng or random
    suffix = "".join(rng.choice(_SKU_ALPHABET) for _ in range(6))
    return f"{_prefix(category)}-{_prefix(name, fallback='PRD')}-{suffix}"


def ean13_check_digit(digits: str) -> int:
    """Check digit for the first 12 digits of an EAN-13 code"""
    if len(digits) != 12 or not digits.isdigit():
        raise ValueError("EAN-13 check digit needs exactly 12 digits")

    total = sum(int(d) * (3 if i % 2 else 1) for i, d in enumerate(digits))
    return (10 - total % 10) % 10


def generate_barcode(rng: Optional[random.Random] = None) -> str:
    """Random 13-digit EAN barcode with a valid check digit"""
    rng = rng or random
    body = str(rng.randint(1, 9)) + "".join(str(rng.randint(0, 9)) for _ in range(11))
    return body + str(ean13_check_digit(body))


def generate_tracking_number(rng: Optional[random.Random] = None) -> str:
    """TRK + epoch milliseconds + random 0-999"""
    rng = rng or random
    return f"TRK{_millis()}{rng.randint(0, 999)}"


def order_tracking_number(order_id) -> str:
    """Display tracking number derived from an order id, TRK + id padded to 10"""
    return f"TRK{str(order_id).rjust(10, '0')}"


def generate_order_number() -> str:
    return f"ORD-{_millis()}"


def slugify(name: str) -> str:
    """URL slug: lowercase, non-alphanumeric runs to '-', trimmed, plus ms timestamp"""
    base = re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")
    return f"{base}-{_millis()}"
