#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from laakhay.fedi import ClientConfig, InstanceClient


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Search accounts, statuses and hashtags")
    p.add_argument("query")
    p.add_argument("--resolve", action="store_true", help="Resolve remote accounts via webfinger")
    return p.parse_args()


async def main() -> None:
    args = parse_args()

    async with InstanceClient(ClientConfig.from_env()) as client:
        result = await client.search_v2(args.query, resolve=args.resolve)
        print(f"Accounts ({len(result.accounts)}):")
        for account in result.accounts:
            print(f"  @{account.acct}")
        print(f"Statuses ({len(result.statuses)}):")
        for status in result.statuses:
            print(f"  {status.uri}")
        print(f"Hashtags ({len(result.hashtags)}):")
        for tag in result.hashtags:
            print(f"  #{tag.name}")


if __name__ == "__main__":
    asyncio.run(main())
