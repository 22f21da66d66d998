#!/usr/bin/env python3
"""
Master Server List Demo

This example shows how to:
1. Page through a master server's list lazily
2. Narrow the list with filters
3. Stop at a page ceiling and keep what was already received
"""

import asyncio
import logging
import sys

sys.path.insert(0, '..')
from pysourcequery import (
    MASTER_SOURCE,
    EnumerationLimitError,
    FilterSet,
    MasterServerQuery,
    QueryError,
    Region,
)


async def run(region: Region):
    filters = FilterSet(appid=730, dedicated=True, nor={'empty': True, 'full': True})
    query = MasterServerQuery(MASTER_SOURCE, region, filters, timeout=2.0, attempts=3, max_pages=10)

    count = 0
    async for address in query.iter_addresses():
        count += 1
        print(f"{count:>5}  {address}")

    print(f"\nTotal servers: {count}")


def main():
    """Main demo function"""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    region = Region[sys.argv[1].upper()] if len(sys.argv) > 1 else Region.EUROPE
    print(f"Listing non-empty CS:GO servers in {region.name}...")

    try:
        asyncio.run(run(region))
    except EnumerationLimitError as e:
        print(f"Stopped early: {e}")
    except QueryError as e:
        print(f"Master query failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
