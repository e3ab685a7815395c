"""HTTP retrieval of documentation pages and schemas."""

import requests


class FetchError(Exception):
    """A page or schema could not be retrieved."""

    def __init__(self, url: str, message: str, status_code: int | None = None) -> None:
        self.url = url
        self.status_code = status_code
        super().__init__(f"{url}: {message}" + (f" (status={status_code})" if status_code else ''))


class PageFetcher:
    """Fetches text and JSON over HTTP.

    No retries; a failure raises ``FetchError`` and the caller decides
    whether the run continues.

    Args:
        session: Session to reuse across requests.
        timeout: Per-request timeout in seconds; None leaves it to requests.
    """

    USER_AGENT = 'resource-catalog/1.0'

    def __init__(self, session: requests.Session | None = None, timeout: float | None = None) -> None:
        if session is None:
            session = requests.Session()
            session.headers['User-Agent'] = self.USER_AGENT
        self._session = session
        self._timeout = timeout

    def fetch_text(self, url: str) -> str:
        return self._get(url).text

    def fetch_json(self, url: str) -> object:
        resp = self._get(url)
        try:
            return resp.json()
        except ValueError as e:
            raise FetchError(url, f"Invalid JSON: {e}", resp.status_code)

    def _get(self, url: str) -> requests.Response:
        try:
            resp = self._session.get(url, timeout=self._timeout)
        except requests.RequestException as e:
            raise FetchError(url, str(e))
        if not resp.ok:
            raise FetchError(url, resp.reason or 'HTTP error', resp.status_code)
        return resp
