"""
Browsing and Favorites Example

This example demonstrates:
- Fetching the corpus over HTTP instead of from disk
- Listing books and paging through one of them
- Looking up a single hadith
- Marking favorites and reading them back
"""

import asyncio

from adhkar import AdhkarService, MemoryBackend, configure


async def main():
    print("Browsing and Favorites Example")
    print("=" * 80)

    # Step 1: Configure global settings
    print("\nStep 1: Configuring Adhkar...")
    settings = configure(
        corpus_base_url="https://corpus.example.org/db/by_book",
        max_concurrent_loads=8,
    )
    print(f"  Corpus: {settings.corpus_base_url}")

    # Favorites kept in memory for this run only
    async with AdhkarService(settings, favorites_backend=MemoryBackend()) as service:
        # Step 2: Books
        print("\nStep 2: Available books...")
        for book in await service.get_available_books():
            print(f"  {book.id:22s} {book.hadith_count:6d} hadiths  [{book.category}]")

        # Step 3: Page through a chapter
        print("\nStep 3: First chapter of Sahih al-Bukhari...")
        chapters = await service.get_chapters("bukhari")
        if chapters:
            page = await service.get_hadiths_by_book("bukhari", limit=3, chapter_id=chapters[0].id)
            print(f"  {chapters[0].english}: {page.total} hadiths")
            for record in page.results:
                print(f"  #{record.hadith_number}: {record.english[:70]}")

        # Step 4: One hadith
        record = await service.get_hadith("bukhari-6306")
        if record:
            print(f"\nStep 4: {record.id} ({record.chapter_name})")
            print(f"  {record.narrator}")
            print(f"  {record.english[:200]}")

        # Step 5: Favorites
        print("\nStep 5: Favorites...")
        duas = await service.get_duas()
        for dua in duas[:2]:
            service.toggle_favorite(dua.id)
        favorites = [d for d in await service.get_duas() if d.favorite]
        print(f"  {len(favorites)} favorite supplications: {service.get_favorite_duas()}")


if __name__ == "__main__":
    asyncio.run(main())
