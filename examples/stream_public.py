#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging

from laakhay.fedi import ClientConfig, EventKind, InstanceClient


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Stream public (or hashtag) events")
    p.add_argument("hashtag", nargs="?", help="Follow a hashtag instead of the public timeline")
    p.add_argument("--local", action="store_true")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.INFO)

    async with InstanceClient(ClientConfig.from_env()) as client:
        if args.hashtag:
            if args.local:
                reader = client.streaming_local_hashtag(args.hashtag)
            else:
                reader = client.streaming_public_hashtag(args.hashtag)
        else:
            reader = client.streaming_local() if args.local else client.streaming_public()

        async for event in reader:
            if event.kind is EventKind.UPDATE:
                status = event.payload
                print(f"update       | {status.account.acct} | {status.content[:60]}")
            elif event.kind is EventKind.NOTIFICATION:
                note = event.payload
                print(f"notification | {note.type} | {note.account.acct}")
            elif event.kind is EventKind.DELETE:
                print(f"delete       | {event.payload}")
            else:
                print(f"{event.kind.value:12} |")


if __name__ == "__main__":
    asyncio.run(main())
