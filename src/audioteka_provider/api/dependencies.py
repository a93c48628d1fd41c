from __future__ import annotations

from typing import Optional

from fastapi import Header, HTTPException, Request

from audioteka_provider.scrape.provider import AudiotekaProvider


def get_provider(request: Request) -> AudiotekaProvider:
    return request.app.state.provider


def require_authorization(authorization: Optional[str] = Header(default=None)) -> str:
    # Any non-empty value is accepted; the key itself is not checked.
    if not authorization:
        raise HTTPException(status_code=401, detail="Unauthorized")
    return authorization
