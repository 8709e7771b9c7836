from __future__ import annotations

import logging

import requests

from indexai.domain.entries import display_name
from indexai.domain.search_context import UNKNOWN_TITLE, extract_page_title
from indexai.ports.search_port import SearchPort

logger = logging.getLogger(__name__)


class GoogleSearchAdapter(SearchPort):
    def __init__(
        self,
        search_url: str,
        user_agent: str,
        title_suffix: str = " - Google Search",
        timeout: float = 30,
    ) -> None:
        self._search_url = search_url
        self._user_agent = user_agent
        self._title_suffix = title_suffix
        self._timeout = timeout

    def search_title(self, query: str) -> str:
        try:
            response = requests.get(
                self._search_url,
                params={"q": display_name(query)},
                headers={"User-Agent": self._user_agent},
                timeout=self._timeout,
            )
        except (requests.RequestException, UnicodeError) as exc:
            logger.warning("Search for %r failed: %s", query, exc)
            return UNKNOWN_TITLE
        title = extract_page_title(response.text, self._title_suffix)
        logger.debug("Search for %r returned title %r", query, title)
        return title
