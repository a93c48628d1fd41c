"""Markup selectors for the Audioteka front-end.

The class names below (``teaser_title__CZ9eq``, ``StarIcon__Label-sc-...``) are
generated by the site's build and change whenever Audioteka redeploys its
front-end. When parsing starts returning nothing, update this table; the
parsing code itself does not need to change.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True)
class ExtractionPolicy:
    # search results page
    search_entry: str
    title: str
    link: str
    author: str
    cover: str
    rating: str
    id_attribute: str

    # detail page
    row_labels: Dict[str, str] = field(default_factory=dict)
    series: str = ""
    detail_rating: str = ""
    detail_cover: str = ""

    def row_value(self, name: str, linked: bool = False) -> str:
        """Selector for the value cell of the details-table row labelled ``name``."""
        label = self.row_labels[name]
        selector = f'tr:-soup-contains("{label}") td:last-child'
        return f"{selector} a" if linked else selector


AUDIOTEKA_POLICY = ExtractionPolicy(
    search_entry=".adtk-item.teaser_teaser__kRYek",
    title=".teaser_title__CZ9eq",
    link=".teaser_mainLink__YBhax",
    author=".teaser_author__BV8Ke",
    cover=".teaser_cover__2EVLn",
    rating=".teaser_rating__ksFn3",
    id_attribute="data-item-id",
    row_labels={
        "narrator": "Głosy",
        "duration": "Długość",
        "publisher": "Wydawca",
        "type": "Typ",
        "genres": "Kategoria",
    },
    series=".Collections__CollectionList-sc-cd06413d-1 a",
    detail_rating=".StarIcon__Label-sc-96b8391b-2",
    detail_cover=".ProductTop-styled__Cover-sc-aae7c7ba-0",
)
