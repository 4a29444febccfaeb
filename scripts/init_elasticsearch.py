#!/usr/bin/env python3
"""
Create the Elasticsearch 'products' index and load the seeded catalog into it.
Use --reset-index when the mapping changed or the index returns 503 / no_shard_available.

  python scripts/init_elasticsearch.py
  python scripts/init_elasticsearch.py --variant sku --reset-index

Reads ELASTICSEARCH_URL / ELASTICSEARCH_INDEX from .env (default http://localhost:9200, products).
"""

import argparse
import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from app.catalog.store import CatalogStore
from app.config import get_settings
from app.search.elasticsearch_client import (
    count_products,
    create_elasticsearch_client,
    ensure_products_index,
    index_products,
    reset_products_index,
)
from app.search.query_builder import compose_search_body


async def run(variant: str, reset: bool, probe: str) -> int:
    settings = get_settings()
    index = settings.elasticsearch_index
    catalog = CatalogStore.from_variant(variant)
    es = create_elasticsearch_client(settings)
    try:
        if reset:
            await reset_products_index(es, index)
            print(f"Recreated index '{index}'.")
        elif await ensure_products_index(es, index):
            print(f"Created index '{index}'.")
        else:
            print(f"Index '{index}' already exists.")

        if not await index_products(es, index, list(catalog)):
            print("Some products failed to index; see log output.")
            return 1
        print(f"Indexed {len(catalog)} '{variant}' products. Documents in index: {await count_products(es, index)}")

        response = await es.search(index=index, **compose_search_body(probe, size=5))
        hits = response["hits"]["hits"]
        print(f"Probe search {probe!r}: {len(hits)} hit(s)")
        for hit in hits:
            print(f"  {hit['_id']}  {hit['_score']}  {hit['_source']['name']}")
        return 0
    finally:
        await es.close()


def main():
    ap = argparse.ArgumentParser(description="Create the products index and index the seeded catalog")
    ap.add_argument("--variant", choices=["basic", "sku"], default=get_settings().catalog_variant, help="Catalog to index")
    ap.add_argument("--reset-index", action="store_true", help="Delete the index first, then recreate and index")
    ap.add_argument("--probe", default="headphones", help="Query to run after indexing")
    args = ap.parse_args()
    sys.exit(asyncio.run(run(args.variant, args.reset_index, args.probe)))


if __name__ == "__main__":
    main()
