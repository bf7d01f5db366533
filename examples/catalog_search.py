#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging

from laakhay.catalog import CatalogClient, ClientSettings


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Search the catalog and page through documents")
    p.add_argument("--doi", help="Catalog search by DOI")
    p.add_argument("--filehash", help="Catalog search by SHA-1 file hash")
    p.add_argument("--limit", type=int, default=5, help="Documents per page")
    p.add_argument("--pages", type=int, default=2, help="Document pages to fetch")
    p.add_argument("--verbose", action="store_true")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    # Token and base URL from LAAKHAY_CATALOG_TOKEN / LAAKHAY_CATALOG_BASE_URL
    async with CatalogClient(settings=ClientSettings.from_env()) as client:
        query = {k: v for k, v in (("doi", args.doi), ("filehash", args.filehash)) if v}
        if query:
            records = await client.catalog.search(query)
            print("=" * 65)
            for record in records:
                print(f"{record.get('id', ''):38} | {record.get('title', '')}")
            print("=" * 65)

        documents = await client.documents.list({"limit": args.limit})
        print(f"Library documents: {client.documents.count}")
        for page in range(args.pages):
            for doc in documents:
                print(f"[{page + 1}] {doc.get('id', ''):38} | {doc.get('title', '')}")
            if not client.documents.pagination_links["next"]:
                break
            documents = await client.documents.next_page()


if __name__ == "__main__":
    asyncio.run(main())
