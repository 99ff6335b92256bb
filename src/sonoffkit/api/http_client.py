import logging
from typing import Optional

import requests

from sonoffkit import config
from sonoffkit.errors import TransportError

_LOGGER = logging.getLogger(__name__)


class HttpClient:
    """POSTs JSON bodies to a device's local control endpoint."""

    def __init__(self, base_url: str, headers: Optional[dict[str, str]] = None, timeout: Optional[float] = None):
        self.session = requests.Session()
        self.base_url = base_url.rstrip("/")
        self.headers = {"Content-Type": "application/json"}
        if headers:
            self.headers.update(headers)
        self.timeout = config.timeout() if timeout is None else timeout

    def post(self, path: str, body: str) -> bytes:
        url = f"{self.base_url}{path}"
        try:
            r = self.session.post(url, data=body.encode("utf-8"), headers=self.headers, timeout=self.timeout)
            # non-2xx never reaches the envelope decoder
            r.raise_for_status()
        except requests.HTTPError as e:
            raise TransportError(f"POST {url} failed with status {getattr(e.response, 'status_code', '?')}") from e
        except requests.RequestException as e:
            raise TransportError(f"POST {url} failed: {e}") from e
        # raise_for_status lets unfollowed 3xx through
        if not 200 <= r.status_code < 300:
            raise TransportError(f"POST {url} failed with status {r.status_code}")

        _LOGGER.debug("POST %s -> %s", url, r.status_code)
        return r.content

    def close(self) -> None:
        self.session.close()
