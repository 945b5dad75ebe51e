"""
Tag sources for the protoc version catalog.

Two implementations of the TagSource interface:
- StaticTagSource: a fixed, in-memory tag list (tests, offline hosts)
- GitHubTagSource: the GitHub REST tags endpoint, following pagination
"""

import logging
import os
from typing import Iterable, List, Optional

import requests
from requests.exceptions import RequestException

from protockit.core.exceptions import TagSourceError
from protockit.core.interfaces import TagSource

logger = logging.getLogger(__name__)

DEFAULT_REPOSITORY = "protocolbuffers/protobuf"
DEFAULT_API_URL = "https://api.github.com"


class StaticTagSource(TagSource):
    """Tag source backed by a fixed list."""

    def __init__(self, tags: Iterable[str]):
        self._tags = list(tags)

    def fetch_tags(self) -> List[str]:
        return list(self._tags)


class GitHubTagSource(TagSource):
    """
    List repository tags through the GitHub REST API.

    Tags are returned in the order GitHub reports them. A token is read from
    the GITHUB_TOKEN environment variable when none is given, which raises
    the anonymous rate limit.

    Example:
        >>> source = GitHubTagSource()
        >>> tags = source.fetch_tags()
        >>> "v28.3" in tags
        True
    """

    def __init__(
        self,
        repository: str = DEFAULT_REPOSITORY,
        api_url: str = DEFAULT_API_URL,
        token: Optional[str] = None,
        per_page: int = 100,
        timeout: float = 30,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize GitHub tag source.

        Args:
            repository: "owner/name" of the repository
            api_url: GitHub API base URL (GitHub Enterprise hosts differ)
            token: API token; falls back to $GITHUB_TOKEN
            per_page: Page size requested from the API (max 100)
            timeout: Per-request timeout in seconds
            session: Optional requests session to reuse
        """
        self.repository = repository
        self.api_url = api_url.rstrip("/")
        self.token = token if token is not None else os.environ.get("GITHUB_TOKEN")
        self.per_page = per_page
        self.timeout = timeout
        self.session = session or requests.Session()

    @property
    def tags_url(self) -> str:
        return f"{self.api_url}/repos/{self.repository}/tags"

    def _headers(self) -> dict:
        headers = {"Accept": "application/vnd.github+json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def fetch_tags(self) -> List[str]:
        """
        Fetch all tag names, following the Link header across pages.

        Raises:
            TagSourceError: On network errors, HTTP errors or unexpected payloads
        """
        url: Optional[str] = self.tags_url
        params: Optional[dict] = {"per_page": self.per_page}
        tags: List[str] = []
        pages = 0

        while url:
            try:
                response = self.session.get(
                    url, params=params, headers=self._headers(), timeout=self.timeout
                )
                response.raise_for_status()
                payload = response.json()
            except RequestException as e:
                raise TagSourceError(
                    f"Failed to fetch tags for {self.repository}: {e}"
                ) from e
            except ValueError as e:
                raise TagSourceError(
                    f"Invalid JSON from {url}: {e}"
                ) from e

            if not isinstance(payload, list):
                raise TagSourceError(
                    f"Unexpected response from {url}: expected a list of tags"
                )

            tags.extend(item["name"] for item in payload if "name" in item)
            pages += 1

            # The "next" link already carries the query string.
            url = response.links.get("next", {}).get("url")
            params = None

        logger.debug(f"Fetched {len(tags)} tags for {self.repository} ({pages} pages)")
        return tags


__all__ = [
    "DEFAULT_REPOSITORY",
    "DEFAULT_API_URL",
    "StaticTagSource",
    "GitHubTagSource",
]
