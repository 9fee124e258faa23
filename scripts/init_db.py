#!/usr/bin/env python3
"""
Create the cafe tables and optionally load demo data.

Usage:
  python scripts/init_db.py cafe 5432
  python scripts/init_db.py cafe 5432 --drop --seed 20
"""

from __future__ import annotations

import argparse
import logging
import sys

from cafe.config import get_config
from cafe.data.connection import CafeError, get_sql_client
from cafe.data.demo_data import load_demo_data
from cafe.data.schema import ensure_schema


logger = logging.getLogger("init_db")


def main() -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("dbname")
    ap.add_argument("port", type=int)
    ap.add_argument("--host", default=None)
    ap.add_argument("--drop", action="store_true", help="drop existing tables first")
    ap.add_argument("--seed", type=int, default=0, metavar="N", help="load demo data with N customers")
    args = ap.parse_args()

    try:
        cfg = get_config().with_overrides(db_name=args.dbname, db_port=args.port, db_host=args.host)
    except ValueError as e:
        logging.basicConfig(stream=sys.stderr)
        logger.error("Invalid configuration: %s", e)
        return 1
    logging.basicConfig(stream=sys.stderr, level=cfg.log_level)

    try:
        client = get_sql_client(cfg)
    except CafeError as e:
        logger.error("Unable to connect to %s: %s", cfg.url, e)
        return 1

    try:
        ensure_schema(client, drop=args.drop)
        print(f"Schema ready: {cfg.url}")
        if args.seed:
            n_orders = load_demo_data(client, n_customers=args.seed)
            print(f"Loaded {args.seed} customers and {n_orders} orders")
    except CafeError as e:
        logger.error("%s", e)
        return 1
    finally:
        client.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
