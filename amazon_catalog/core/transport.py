"""Blocking HTTP GET transport built on requests"""

from typing import Optional
import logging

import requests

from amazon_catalog.core.errors import TransportFailure, TransportUnavailable
from amazon_catalog.utils.logger import redact_url

logger = logging.getLogger(__name__)


class RequestsTransport:
    """
    HTTP collaborator used by CatalogClient

    Only performs a GET and returns the raw body. Status codes are not
    interpreted: the service reports request errors inside the XML body.
    Any object with a compatible get(url) -> bytes method can replace it.
    """

    def __init__(self, timeout: float = 30.0, session: Optional[requests.Session] = None):
        self.timeout = timeout
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    def get(self, url: str) -> bytes:
        if self.session is None:
            raise TransportUnavailable("HTTP transport has been closed")

        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportFailure(redact_url(url), str(e))

        logger.debug(f"GET {redact_url(url)} -> {response.status_code}")
        return response.content

    def close(self):
        if self.session is not None and self._owns_session:
            self.session.close()
        self.session = None
