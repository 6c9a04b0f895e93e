# src/faleproxy/services/page_fetch_service.py
import logging
import time
from typing import Dict, Optional

import requests

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Raised when a remote page cannot be retrieved."""

    def __init__(self, url: str, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class PageFetchService:
    """
    Retrieves the raw HTML of a remote page.
    One GET per call: no caching, no retries.
    """

    def __init__(self, config: Optional[Dict] = None, session: Optional[requests.Session] = None):
        config = config or {}
        self.timeout = float(config.get('timeout', 10))
        self.user_agent = config.get('user_agent') or "Faleproxy/1.0"
        self.session = session or requests.Session()
        self.session.headers.update({'User-Agent': self.user_agent})

    def fetch(self, url: str) -> str:
        """
        Fetches `url` and returns the decoded response body.

        Raises:
            FetchError: On invalid URLs, connection errors, timeouts
                        and non-2xx responses.
        """
        start = time.perf_counter()
        try:
            resp = self.session.get(url, timeout=self.timeout)
            resp.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise FetchError(url, str(e), status_code=status) from e
        except requests.RequestException as e:
            raise FetchError(url, str(e)) from e

        # requests assumes ISO-8859-1 for text/html without a charset
        if "charset" not in resp.headers.get("Content-Type", "").lower():
            resp.encoding = resp.apparent_encoding

        elapsed = (time.perf_counter() - start) * 1000
        logger.debug(
            "Fetched %s (status %d, %d bytes) in %.2f ms",
            url, resp.status_code, len(resp.content), elapsed
        )
        return resp.text
