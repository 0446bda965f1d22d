"""
Unit tests for the template-based content generator and identifier helpers

Author: Amzify Team
Date: 2025-11-12
"""
import random
import re

import pytest

from seller_panel.services import content_generator as cg
from seller_panel.services.identifiers import (
    ean13_check_digit,
    generate_barcode,
    generate_order_number,
    generate_sku,
    generate_tracking_number,
    order_tracking_number,
    slugify,
)


class TestProductTypeDetection:

    @pytest.mark.parametrize("name,expected", [
        ("Wireless Earbuds Pro", "headphones"),
        ("Gaming Laptop 15", "laptop"),
        ("Running Shoes", "shoes"),
        ("Mystery Box", "generic"),
    ])
    def test_detect_product_type(self, name, expected):
        assert cg.detect_product_type(name) == expected

    def test_first_matching_pattern_wins(self):
        # also matches "phone", which is checked later
        assert cg.detect_product_type("Headphone Stand") == "headphones"


class TestDescriptions:

    def test_description_mentions_product(self):
        text = cg.generate_description("Wireless Earbuds Pro")

        assert "Wireless Earbuds Pro" in text
        assert "{product}" not in text
        assert text.count("\n\n") == 2

    def test_short_description_is_deterministic_with_rng(self):
        first = cg.generate_short_description("Mystery Box", rng=random.Random(7))
        second = cg.generate_short_description("Mystery Box", rng=random.Random(7))

        assert first == second
        assert "Mystery Box" in first

    def test_seo_lengths_are_capped(self):
        seo = cg.generate_seo("Ultra Premium Noise Cancelling Over-Ear Headphones", "x" * 300)

        assert len(seo["title"]) <= 60
        assert len(seo["description"]) <= 160
        assert seo["title"].startswith("Ultra Premium")

    def test_improve_description_professional(self):
        assert cg.improve_description("An Amazing, good and nice gadget", "professional") == \
            "An exceptional, superior and premium gadget"

    def test_improve_description_luxury_rewrites_quality(self):
        assert cg.improve_description("great quality", "luxury") == "prestigious unparalleled quality"

    def test_unknown_tone(self):
        with pytest.raises(ValueError):
            cg.improve_description("text", "sarcastic")


class TestSocialContent:

    def test_unknown_platform_uses_facebook_copy(self):
        assert cg.generate_social_post("Desk Lamp", "myspace") == cg.generate_social_post("Desk Lamp", "facebook")

    def test_hashtags(self):
        tags = cg.generate_hashtags("Desk Lamp", "Home Decor").split(", ")

        assert tags[:3] == ["#DeskLamp", "#HomeDecor", "#BestOfHome"]
        assert "#ShopNow" in tags
        assert len(tags) <= 10

    def test_improve_social_post_prefixes_emoji(self):
        assert cg.improve_social_post("Big sale", "twitter", "professional").endswith(" Big sale")

        with pytest.raises(ValueError):
            cg.improve_social_post("Big sale", "twitter", "angry")


class TestIdentifiers:

    def test_sku_format(self):
        sku = generate_sku("Wireless Mouse", "Electronics", rng=random.Random(1))

        assert re.fullmatch(r"ELE-WIR-[A-Z0-9]{6}", sku)

    def test_sku_without_category(self):
        assert generate_sku("TV", rng=random.Random(1)).startswith("GEN-TVX-")

    def test_ean13_check_digit(self):
        # 4006381333931 is a published EAN-13 example
        assert ean13_check_digit("400638133393") == 1

        with pytest.raises(ValueError):
            ean13_check_digit("123")

    def test_barcode_is_valid_ean13(self):
        barcode = generate_barcode(random.Random(3))

        assert len(barcode) == 13 and barcode.isdigit()
        assert int(barcode[-1]) == ean13_check_digit(barcode[:12])

    def test_tracking_and_order_numbers(self):
        assert re.fullmatch(r"TRK\d{13,}", generate_tracking_number(random.Random(5)))
        assert order_tracking_number(42) == "TRK0000000042"
        assert generate_order_number().startswith("ORD-")

    def test_slugify(self):
        assert re.fullmatch(r"wireless-mouse-2-0-\d+", slugify("  Wireless Mouse 2.0! "))
