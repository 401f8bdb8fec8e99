#!/usr/bin/env python3
"""
Create the customers, products, orders and orders_products tables

Tables that already exist are left untouched. Requires PostgreSQL 13+
(gen_random_uuid() is used for primary keys).

Usage:
    export DATABASE_URL="postgresql://..."
    python3 backend/scripts/init_db.py
"""
import sys
from pathlib import Path

from dotenv import load_dotenv

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))
load_dotenv(Path(__file__).resolve().parent.parent / '.env')

from app.core.database import init_db  # noqa: E402
from app.core.logging_config import setup_logging  # noqa: E402


def main():
    setup_logging()
    init_db()
    print("✅ Database tables ready")


if __name__ == "__main__":
    main()
