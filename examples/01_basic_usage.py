"""
Basic Usage Example for Adhkar

This example demonstrates the simplest way to use Adhkar:
1. Scan the corpus for supplications and remembrances
2. Search and filter the results
3. List the derived categories
"""

import asyncio

from adhkar import AdhkarService, AdhkarSettings


async def main():
    # Directory holding the_9_books/, other_books/ and forties/
    settings = AdhkarSettings(corpus_root="db/by_book")

    async with AdhkarService(settings) as service:
        # Step 1: Scan the corpus (runs once, later calls hit the cache)
        print("Step 1: Scanning the corpus...")
        duas = await service.get_duas()
        azkar = await service.get_azkar()
        print(f"  Found {len(duas)} supplications ({service.corpus_source('duas').value})")
        print(f"  Found {len(azkar)} remembrances ({service.corpus_source('azkar').value})\n")

        # Step 2: Search
        print("Step 2: Supplications mentioning forgiveness:")
        for dua in service.search_duas("forgive", duas)[:5]:
            print(f"  {dua.id:30s} {dua.title}")
            print(f"  {'':30s} {dua.reference}")

        # Step 3: Categories
        print("\nStep 3: Remembrance categories:")
        categories = await service.get_categories("azkar")
        for category in categories[:10]:
            print(f"  {category.count:4d}  {category.name}")

        # Step 4: Filter by the first category
        if categories:
            first = categories[0]
            selected = service.filter_azkar(azkar, first.id)
            print(f"\nStep 4: {len(selected)} remembrances in {first.name!r}")
            for zikr in selected[:3]:
                print(f"  x{zikr.count:<4d} {zikr.arabic}")


if __name__ == "__main__":
    asyncio.run(main())
