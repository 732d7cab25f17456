#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging

from laakhay.fedi import ClientConfig, InstanceClient


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List followers of the authenticated account")
    p.add_argument("--config", help="JSON config file (default: FEDI_* environment)")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.INFO)

    config = ClientConfig.from_json_file(args.config) if args.config else ClientConfig.from_env()
    async with InstanceClient(config) as client:
        page = await client.follows_me()
        count = 0
        async for account in page.items_iter():
            print(f"{account.acct:40} {account.display_name}")
            count += 1
        print(f"Followers: {count}")


if __name__ == "__main__":
    asyncio.run(main())
