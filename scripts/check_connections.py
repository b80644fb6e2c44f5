#!/usr/bin/env python3
"""
Connection Check Script

Run this to verify the datastores are reachable.
Usage: python scripts/check_connections.py
"""
from recruiting.core.config import get_settings
from recruiting.db.mongodb import check_mongo_connection
from recruiting.db.mysql import check_mysql_connection


def main():
    settings = get_settings()
    print("=" * 50)
    print("RECRUITING PLATFORM - CONNECTION CHECK")
    print("=" * 50)
    print(f"\nConfigured datastore: {settings.datastore}")

    # Relational store
    print("\n[1] Checking relational store...")
    if settings.database_url:
        print(f"    URL: {settings.database_url}")
    else:
        print(f"    URL: mysql+pymysql://{settings.mysql_user}:****@{settings.mysql_host}:{settings.mysql_port}/{settings.mysql_db}")
    if check_mysql_connection():
        print("    ✅ Relational store: CONNECTED")
    else:
        print("    ❌ Relational store: FAILED")

    # MongoDB
    print("\n[2] Checking MongoDB...")
    print(f"    URI: {settings.mongodb_uri}")
    print(f"    Database: {settings.mongodb_db}")
    if check_mongo_connection():
        print("    ✅ MongoDB: CONNECTED")
    else:
        print("    ❌ MongoDB: FAILED")

    print("\n" + "=" * 50)
    print("Connection check complete!")
    print("=" * 50)


if __name__ == "__main__":
    main()
