#!/usr/bin/env python3
"""
Seed products from a JSON file.

The file holds a list of {"name", "quantity", "price", "picture"} entries
(or an object with an "items" list). "picture" is an optional path to a
JPEG file, relative to the JSON file.

Usage:
    python scripts/seed_products.py --file products.json [--reset]
"""
import argparse
import sys
import os

# allow running from a checkout without installing
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from inventory_app.db import SessionLocal, init_db
from inventory_app.services.inventory_store import InventoryStore
from inventory_app.services.seed_service import seed_from_file

if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--file", "-f", required=True, help="Path to product json")
    parser.add_argument("--reset", action="store_true", help="Drop and recreate the products table first")
    args = parser.parse_args()
    if not os.path.exists(args.file):
        print("File not found:", args.file)
        sys.exit(1)

    init_db(reset=args.reset)
    db = SessionLocal()
    try:
        created = seed_from_file(args.file, InventoryStore(db))
    finally:
        db.close()
    print("Seeded products:", created)
