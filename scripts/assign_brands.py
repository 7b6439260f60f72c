#!/usr/bin/env python3
"""Run brand assignment for one country/source catalog."""

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from config import settings
from models import CountryCode, SessionLocal, Source, init_db
from services.brand_assignment import assign_brands
from services.catalog_loader import load_brand_relations, load_pharmacy_items

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def run(args) -> int:
    relations = load_brand_relations(args.relations or settings.brand_connections_path)
    products = load_pharmacy_items(args.items or settings.pharmacy_items_path)

    if not args.persist:
        summary = assign_brands(
            args.country, args.source, relations=relations, products=products, output_dir=args.output_dir
        )
    else:
        init_db()
        db = SessionLocal()
        try:
            summary = assign_brands(
                args.country, args.source, relations=relations, products=products,
                output_dir=args.output_dir, db=db,
            )
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    print(f"Products:  {summary.total}")
    print(f"Matched:   {summary.matched}")
    print(f"Unmatched: {summary.unmatched}")
    if args.persist:
        print(f"Persisted: {summary.persisted}")
    print(f"Output:    {summary.output_path}")
    return 0


def main() -> None:
    parser = argparse.ArgumentParser(description="Assign canonical brands to pharmacy product titles")
    parser.add_argument(
        "--country",
        required=True,
        type=str.lower,
        choices=[code.value for code in CountryCode],
        help="Country code, e.g. lv",
    )
    parser.add_argument(
        "--source",
        required=True,
        type=str.lower,
        choices=[source.value for source in Source],
        help="Catalog source identifier",
    )
    parser.add_argument("--relations", help="Brand relations JSON (defaults to BRAND_CONNECTIONS_PATH)")
    parser.add_argument("--items", help="Pharmacy items JSON (defaults to PHARMACY_ITEMS_PATH)")
    parser.add_argument("--output-dir", help="Directory for the JSON artifact (defaults to OUTPUT_DIR)")
    parser.add_argument(
        "--persist",
        action=argparse.BooleanOptionalAction,
        default=settings.persist_mappings,
        help="Also upsert results into the product mapping table (defaults to PERSIST_MAPPINGS)",
    )
    args = parser.parse_args()

    try:
        sys.exit(run(args))
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Brand assignment failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
