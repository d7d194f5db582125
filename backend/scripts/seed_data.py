#!/usr/bin/env python3
"""
Create the schema and seed the sample catalog plus an admin account.

Usage:
    python scripts/seed_data.py [--reset] [--admin-password SECRET] [--no-admin]
"""
import argparse
import os
import sys

# allow running from repo/scripts
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from shopcart.db import SessionLocal, init_db
from shopcart.db.seed import ADMIN_PASSWORD, ADMIN_USERNAME, seed_admin_user, seed_sample_items


def main(argv=None):
    parser = argparse.ArgumentParser(description="Seed sample data.")
    parser.add_argument("--reset", action="store_true", help="drop and recreate all tables first")
    parser.add_argument("--admin-username", default=ADMIN_USERNAME)
    parser.add_argument("--admin-password", default=ADMIN_PASSWORD)
    parser.add_argument("--no-admin", action="store_true", help="do not create the admin account")
    args = parser.parse_args(argv)

    init_db(reset=args.reset)

    db = SessionLocal()
    try:
        created = seed_sample_items(db)
        print("Seeded items:", created)
        if not args.no_admin:
            if seed_admin_user(db, args.admin_username, args.admin_password):
                print(f"Sample user created: username={args.admin_username}")
            else:
                print("Sample user already exists")
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
