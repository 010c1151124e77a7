#!/usr/bin/env python3
"""
Pre-render every update document into the cache directory.

Useful right after a deploy or a release, so the first Joomla site that
asks for updates does not wait on the GitHub API.

Usage:
    python scripts/warm_cache.py https://updates.example.com/
"""

import asyncio
import sys
import time

from jex_update.config import INDEX_TARGET, settings
from jex_update.exceptions import ExtensionUnavailableError
from jex_update.logging_setup import setup_logging
from jex_update.repositories import FileCacheRepository, GitHubSourceClient
from jex_update.services import UpdateFeedService


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


async def warm(base_url: str) -> int:
    """Regenerate the index and every extension document.

    Returns:
        Number of documents that could not be rendered
    """
    client = GitHubSourceClient.create()
    cache_store = FileCacheRepository.create()
    feed = UpdateFeedService.create(source_client=client, cache_store=cache_store)

    failures = 0
    try:
        print_section(f"Warming {cache_store.cache_dir} ({len(feed.catalog)} extensions)")

        start = time.time()
        cache_store.write(INDEX_TARGET, await feed.build_collection(base_url))
        print(f"  ✓ index ({(time.time() - start) * 1000:.0f}ms)")

        for entry in feed.catalog:
            start = time.time()
            try:
                cache_store.write(entry.identifier, await feed.build_extension(entry))
            except ExtensionUnavailableError as e:
                failures += 1
                print(f"  ✗ {entry.slug}: {e.reason.value}")
                continue
            print(f"  ✓ {entry.slug} ({(time.time() - start) * 1000:.0f}ms)")
    finally:
        await client.close()

    return failures


def main() -> None:
    base_url = sys.argv[1] if len(sys.argv) > 1 else f"http://{settings.api_host}:{settings.api_port}/"
    setup_logging(settings.log_level)
    failures = asyncio.run(warm(base_url))
    sys.exit(1 if failures else 0)


if __name__ == "__main__":
    main()
