"""Archive comparison API endpoints"""

from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, File, UploadFile
from fastapi.responses import JSONResponse
from sse_starlette.sse import EventSourceResponse

from models.compare import CompareEvent, CompareResponse, CompareUrlsRequest, ErrorResponse
from models.entry import ArchiveListing, EntryListing
from services.archive_comparison import ComparisonSettings, compare_archives, compare_pair, extract_pair
from services.archive_extractor import ArchiveFormatError, extract_entries, is_text_file
from services.archive_fetcher import fetch_archives
from services.config_manager import ConfigManager

logger = logging.getLogger(__name__)

router = APIRouter()

MISSING_FILES_ERROR = "Both ZIP files are required."


def _missing_files_response() -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(error=MISSING_FILES_ERROR).model_dump(),
    )


def current_settings() -> ComparisonSettings:
    return ComparisonSettings.from_config(ConfigManager.get_instance().get_config())


@router.post(
    "",
    response_model=CompareResponse,
    responses={400: {"model": ErrorResponse}},
)
async def compare_uploads(
    zip1: UploadFile | None = File(None),
    zip2: UploadFile | None = File(None),
):
    """Compare two uploaded ZIP archives"""
    if zip1 is None or zip2 is None:
        return _missing_files_response()

    left_bytes, right_bytes = await asyncio.gather(zip1.read(), zip2.read())
    logger.info(
        f"Comparing {zip1.filename} ({len(left_bytes)} bytes) "
        f"with {zip2.filename} ({len(right_bytes)} bytes)"
    )

    diff = await compare_archives(left_bytes, right_bytes, current_settings())
    return CompareResponse(diff=diff)


async def compare_event_stream(
    left_bytes: bytes,
    right_bytes: bytes,
    settings: ComparisonSettings,
):
    """Yield SSE events for one comparison"""
    try:
        event = CompareEvent(type="progress", stage="extracting")
        yield {"event": "message", "data": event.model_dump_json()}

        left_entries, right_entries = await extract_pair(left_bytes, right_bytes, settings)

        event = CompareEvent(type="progress", stage="comparing")
        yield {"event": "message", "data": event.model_dump_json()}

        diff = await asyncio.to_thread(compare_pair, left_entries, right_entries, settings)

        event = CompareEvent(type="done", diff=diff, done=True)
        yield {"event": "message", "data": event.model_dump_json()}

    except ArchiveFormatError as e:
        logger.error(f"Streamed comparison failed: {e}")
        event = CompareEvent(type="error", error=str(e), done=True)
        yield {"event": "message", "data": event.model_dump_json()}

    except Exception as e:
        logger.exception(f"Unexpected error in streamed comparison: {e}")
        event = CompareEvent(type="error", error=str(e), done=True)
        yield {"event": "message", "data": event.model_dump_json()}


@router.post("/stream")
async def compare_uploads_stream(
    zip1: UploadFile | None = File(None),
    zip2: UploadFile | None = File(None),
):
    """Compare two uploaded ZIP archives, reporting progress over SSE"""
    if zip1 is None or zip2 is None:
        return _missing_files_response()

    # Uploads are closed once the handler returns, so read them up front
    left_bytes, right_bytes = await asyncio.gather(zip1.read(), zip2.read())
    return EventSourceResponse(compare_event_stream(left_bytes, right_bytes, current_settings()))


@router.post(
    "/urls",
    response_model=CompareResponse,
    responses={400: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
async def compare_urls(request: CompareUrlsRequest) -> CompareResponse:
    """Download two archives and compare them"""
    config = ConfigManager.get_instance().get_config()
    fetch = config.get("fetch", {})

    left_bytes, right_bytes = await fetch_archives(
        request.left_url,
        request.right_url,
        timeout_seconds=int(fetch.get("timeoutSeconds", 60)),
        max_bytes=int(fetch.get("maxArchiveBytes", 100 * 1024 * 1024)),
        max_retries=int(fetch.get("maxRetries", 3)),
    )

    diff = await compare_archives(left_bytes, right_bytes, ComparisonSettings.from_config(config))
    return CompareResponse(diff=diff)


@router.post(
    "/entries",
    response_model=ArchiveListing,
    responses={400: {"model": ErrorResponse}},
)
async def list_entries(archive: UploadFile | None = File(None)):
    """List the entries of a single archive without their contents"""
    if archive is None:
        return JSONResponse(
            status_code=400,
            content=ErrorResponse(error="A ZIP file is required.").model_dump(),
        )

    settings = current_settings()
    data = await archive.read()
    entries = await asyncio.to_thread(extract_entries, data, settings.text_extensions)

    listing = [
        EntryListing(
            path=entry.path,
            is_directory=entry.is_directory,
            is_text=not entry.is_directory and is_text_file(entry.path, settings.text_extensions),
            size=entry.size,
        )
        for entry in entries
    ]

    return ArchiveListing(
        entries=listing,
        total_entries=len(listing),
        total_size=sum(entry.size or 0 for entry in entries),
    )
