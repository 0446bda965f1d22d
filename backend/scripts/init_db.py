#!/usr/bin/env python3
"""
Create the Seller Panel tables

Builds every table declared in seller_panel.models on DATABASE_URL.
Existing tables are left untouched.

Usage:
    python scripts/init_db.py
    python scripts/init_db.py --drop   # drop and recreate (destroys data)
"""
import argparse
import logging
from pathlib import Path

from dotenv import load_dotenv

# Load environment
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(env_path)

from seller_panel.core.database import Base, get_engine
import seller_panel.models  # noqa: F401  registers the tables on Base

logger = logging.getLogger(__name__)


def init_db(drop: bool = False) -> None:
    engine = get_engine()

    if drop:
        logger.warning("Dropping all tables")
        Base.metadata.drop_all(engine)

    Base.metadata.create_all(engine)
    logger.info(f"Tables ready: {', '.join(sorted(Base.metadata.tables))}")


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    parser = argparse.ArgumentParser(description='Create the Seller Panel database tables')
    parser.add_argument('--drop', action='store_true', help='Drop existing tables first')
    args = parser.parse_args()

    init_db(drop=args.drop)
