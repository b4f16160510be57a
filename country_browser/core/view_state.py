from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class SortKey(str, Enum):
    NAME_ASC = "name-asc"
    NAME_DESC = "name-desc"
    POP_ASC = "population-asc"
    POP_DESC = "population-desc"

    @classmethod
    def parse(cls, value: Any) -> SortKey:
        """Unknown or empty values fall back to name ascending."""
        if isinstance(value, SortKey):
            return value
        try:
            return cls(value)
        except (TypeError, ValueError):
            return cls.NAME_ASC


@dataclass
class ViewState:
    """
    Represents the current user-controlled view parameters.

    Fields:

    - search_term: case-insensitive substring matched against country names
    - region: exact region to keep; empty string selects every region
    - sort_key: ordering of the derived view
    - page: 1-based page number, kept in range by the pipeline
    """

    search_term: str = ""
    region: str = ""
    sort_key: SortKey = SortKey.NAME_ASC
    page: int = 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            "search_term": self.search_term,
            "region": self.region,
            "sort_key": self.sort_key.value,
            "page": self.page,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any] | None) -> ViewState:
        if not isinstance(data, dict):
            data = {}

        try:
            page = int(data.get("page", 1))
        except (TypeError, ValueError, OverflowError):
            page = 1

        return cls(
            search_term=str(data.get("search_term") or ""),
            region=str(data.get("region") or ""),
            sort_key=SortKey.parse(data.get("sort_key")),
            page=max(1, page),
        )
