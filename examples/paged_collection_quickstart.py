#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging

from linkpager import NavigationError, PagedResource, PageRelation, RESTTransport


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Walk a Link-header paged collection")
    p.add_argument("url", help="Collection endpoint, e.g. https://host/api/workspace")
    p.add_argument("--limit", type=int, default=10, help="Page size")
    p.add_argument("--key", default="id", help="Object key used for identity projection")
    p.add_argument("--verbose", action="store_true")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    objects: dict = {}
    async with PagedResource(
        args.url, RESTTransport(), object_key=args.key, identity_store=objects
    ) as resource:
        items = await resource.fetch_first_page(args.limit)
        info = resource.get_pages_info()
        print(f"PAGE {info.current_page_number}/{info.total_pages} | {len(items)} items")

        try:
            items = await resource.fetch_page(PageRelation.LAST)
        except NavigationError as exc:
            print(f"LAST unavailable: {exc}")
        else:
            info = resource.get_pages_info()
            print(f"PAGE {info.current_page_number}/{info.total_pages} | {len(items)} items")

        print(f"Distinct objects seen: {len(objects)}")


if __name__ == "__main__":
    asyncio.run(main())
