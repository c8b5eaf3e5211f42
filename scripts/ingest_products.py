#!/usr/bin/env python3
"""
Load the product export into Meilisearch: clean, upload in batches, wait for indexing.
Requires a running Meilisearch; MASTER_KEY and MEILI_URL are read from the environment / .env.

  python scripts/ingest_products.py
  python scripts/ingest_products.py --file data/sku.json --batch-size 500
  python scripts/ingest_products.py --smoke-test
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from catalog.config import get_settings
from catalog.core.errors import IngestionError
from catalog.core.logging import configure_logging
from catalog.ingestion.pipeline import run_ingestion, run_smoke_searches
from catalog.search.meilisearch_client import MeilisearchClient

logger = logging.getLogger("ingest_products")

SMOKE_QUERIES = ["FEVICOL", "Adhesives", "ADH1"]


async def ingest(args: argparse.Namespace) -> int:
    overrides = {}
    if args.file:
        overrides["data_file"] = args.file
    if args.batch_size:
        overrides["batch_size"] = args.batch_size
    if args.last_task_only:
        overrides["wait_for_all_tasks"] = False
    settings = get_settings().model_copy(update=overrides)

    client = MeilisearchClient(
        settings.meili_url,
        settings.index_name,
        api_key=settings.master_key,
        timeout=settings.meili_timeout_seconds,
    )
    try:
        report = await run_ingestion(client, settings)
        logger.info(
            "Done. Loaded %d documents, uploaded %d batches",
            report.documents_loaded,
            len(report.upload.batch_sizes),
        )
        if args.smoke_test:
            await run_smoke_searches(client, SMOKE_QUERIES)
    except IngestionError as e:
        logger.error("%s", e)
        return 1
    finally:
        await client.aclose()
    return 0


def main():
    ap = argparse.ArgumentParser(description="Bulk-load products from a JSON file into Meilisearch")
    ap.add_argument("--file", help="JSON array of product records (default: DATA_FILE or sku.json)")
    ap.add_argument("--batch-size", type=int, help="Documents per upload request (default: BATCH_SIZE or 1000)")
    ap.add_argument("--last-task-only", action="store_true", help="Only wait for the last batch task")
    ap.add_argument("--smoke-test", action="store_true", help="Run a few sample searches afterwards")
    args = ap.parse_args()

    configure_logging(get_settings().log_level)
    sys.exit(asyncio.run(ingest(args)))


if __name__ == "__main__":
    main()
