from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from audioteka_provider.api.dependencies import get_provider, require_authorization
from audioteka_provider.api.formatting import format_matches
from audioteka_provider.core.logging import logger
from audioteka_provider.schemas.search import ErrorResponse, SearchResponse
from audioteka_provider.scrape.provider import AudiotekaProvider

router = APIRouter(tags=["search"], dependencies=[Depends(require_authorization)])


@router.get(
    "/search",
    response_model=SearchResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def search(
    query: Optional[str] = None,
    author: Optional[str] = None,
    provider: AudiotekaProvider = Depends(get_provider),
):
    logger.info("Received search request: query=%r author=%r", query, author)
    if not query:
        raise HTTPException(status_code=400, detail="Query parameter is required")

    try:
        records = await provider.lookup(query, author)
        response = format_matches(records)
    except Exception:
        logger.exception("Search error for %r", query)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    logger.debug("Sending response: %s", response.model_dump_json(exclude_none=True))
    return response
