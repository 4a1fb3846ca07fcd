#!/usr/bin/env python3
"""
Reset the persisted venue booking dataset.

Deletes the dataset blob from a file or SQLite storage and, unless
``--no-seed`` is given, writes the seed dataset (facility types, time
slots and no reservations) back.  Use this to start a demo from a
clean state.

Usage:
    python reset_booking_data.py --backend sqlite --path ./venue_booking_api/venue_booking.db
    python reset_booking_data.py --backend file --path ./data/booking.json --no-seed
"""

import argparse
import asyncio
import os
import sys

from venue_booking_api.app.core.config import Settings
from venue_booking_api.app.services.booking_store import create_booking_store


def parse_args(argv=None):
    ap = argparse.ArgumentParser(description="Reset the venue booking dataset.")
    ap.add_argument("--backend", required=True, choices=["file", "sqlite"], help="Storage backend holding the dataset")
    ap.add_argument("--path", required=True, help="Path to the JSON file or SQLite database")
    ap.add_argument("--key", default="venueBookingData", help="Storage key of the dataset blob")
    ap.add_argument("--no-seed", action="store_true", help="Leave the storage empty instead of reseeding")
    return ap.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    if not os.path.exists(args.path):
        print(f"[!] Storage not found: {args.path}", file=sys.stderr)
        return 1

    store = create_booking_store(
        Settings(
            storage_backend=args.backend,
            storage_path=os.path.abspath(args.path),
            storage_key=args.key,
        )
    )
    asyncio.run(store.reset(reseed=not args.no_seed))
    if args.no_seed:
        print(f"[+] Dataset {args.key!r} removed from {args.path}")
    else:
        print(f"[+] Dataset {args.key!r} in {args.path} reset to seed data")
    return 0


if __name__ == "__main__":
    sys.exit(main())
