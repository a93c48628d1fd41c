from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel


class SeriesSchema(BaseModel):
    series: str
    sequence: Optional[str] = None


class MatchSchema(BaseModel):
    title: str
    subtitle: Optional[str] = None
    author: str
    narrator: Optional[str] = None
    publisher: Optional[str] = None
    publishedYear: Optional[str] = None
    description: Optional[str] = None
    cover: Optional[str] = None
    isbn: Optional[str] = None
    asin: Optional[str] = None
    genres: Optional[List[str]] = None
    tags: Optional[List[str]] = None
    series: Optional[List[SeriesSchema]] = None
    language: Optional[str] = None
    duration: Optional[str] = None


class SearchResponse(BaseModel):
    matches: List[MatchSchema]


class ErrorResponse(BaseModel):
    error: str
