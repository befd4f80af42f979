"""
Archive Fetcher - Download archives from remote URLs
"""

from __future__ import annotations

import asyncio
import logging
from urllib.parse import urlparse

import aiohttp

logger = logging.getLogger(__name__)

RETRYABLE_STATUSES = (429, 503)


class ArchiveFetchError(Exception):
    """A remote archive could not be downloaded"""

    def __init__(self, message: str, status: int | None = None, retryable: bool = False):
        super().__init__(message)
        self.status = status
        self.retryable = retryable


def _validate_url(url: str):
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ArchiveFetchError(f"Unsupported archive URL: {url}")


async def _download(url: str, timeout_seconds: int, max_bytes: int) -> bytes:
    """Single download attempt with automatic session cleanup"""
    timeout = aiohttp.ClientTimeout(total=timeout_seconds)
    async with aiohttp.ClientSession(timeout=timeout) as session:
        async with session.get(url) as response:
            if response.status != 200:
                raise ArchiveFetchError(
                    f"Failed to download {url} (HTTP {response.status})",
                    status=response.status,
                    retryable=response.status in RETRYABLE_STATUSES,
                )

            if response.content_length is not None and response.content_length > max_bytes:
                raise ArchiveFetchError(f"Archive at {url} exceeds {max_bytes} bytes")

            chunks = []
            received = 0
            async for chunk in response.content.iter_chunked(64 * 1024):
                received += len(chunk)
                if received > max_bytes:
                    raise ArchiveFetchError(f"Archive at {url} exceeds {max_bytes} bytes")
                chunks.append(chunk)
            return b"".join(chunks)


async def fetch_archive(
    url: str,
    *,
    timeout_seconds: int = 60,
    max_bytes: int = 100 * 1024 * 1024,
    max_retries: int = 3,
) -> bytes:
    """Download an archive, retrying timeouts and 429/503 with backoff"""
    _validate_url(url)
    max_retries = max(max_retries, 1)

    for attempt in range(max_retries):
        try:
            return await _download(url, timeout_seconds, max_bytes)
        except asyncio.TimeoutError:
            if attempt < max_retries - 1:
                wait_time = (2**attempt) * 2
                logger.warning(
                    f"Timeout downloading {url}. Retrying in {wait_time}s... "
                    f"(attempt {attempt + 1}/{max_retries})"
                )
                await asyncio.sleep(wait_time)
                continue
            raise ArchiveFetchError(f"Timeout downloading {url} after {max_retries} attempts")
        except ArchiveFetchError as e:
            if e.retryable and attempt < max_retries - 1:
                wait_time = (2**attempt) * 5
                logger.warning(f"{e}. Retrying in {wait_time}s... (attempt {attempt + 1}/{max_retries})")
                await asyncio.sleep(wait_time)
                continue
            raise
        except aiohttp.ClientError as e:
            raise ArchiveFetchError(f"Network error downloading {url}: {e}") from e

    raise ArchiveFetchError(f"Failed to download {url}")


async def fetch_archives(
    left_url: str,
    right_url: str,
    **options,
) -> tuple[bytes, bytes]:
    """Download both archives concurrently"""
    left_bytes, right_bytes = await asyncio.gather(
        fetch_archive(left_url, **options),
        fetch_archive(right_url, **options),
    )
    return left_bytes, right_bytes
