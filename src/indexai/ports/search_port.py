from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class SearchPort(Protocol):
    def search_title(self, query: str) -> str:
        """Return the title of the results page for a query, or an Unknown marker."""
