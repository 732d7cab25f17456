#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging

from laakhay.fedi import ClientConfig, InstanceClient


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Print the home timeline (reads FEDI_BASE / FEDI_TOKEN)")
    p.add_argument("limit", nargs="?", type=int, default=40, help="Stop after this many statuses")
    p.add_argument("--debug", action="store_true")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)

    async with InstanceClient(ClientConfig.from_env()) as client:
        page = await client.get_home_timeline()
        print("=" * 65)
        print(f"{'Created':25} | {'Account':20} | Content")
        print("-" * 65)
        seen = 0
        async for status in page.items_iter():
            created = status.created_at.isoformat() if status.created_at else "-"
            print(f"{created:25} | {status.account.acct[:20]:20} | {status.content[:60]}")
            seen += 1
            if seen >= args.limit:
                break
        print("=" * 65)


if __name__ == "__main__":
    asyncio.run(main())
