"""Error taxonomy and the per-client error log"""

from collections import deque
from typing import List, Optional


class CatalogError(Exception):
    """Base class for every failure raised inside the client"""


class TransportUnavailable(CatalogError):
    """The HTTP transport is missing or has been closed"""


class TransportFailure(CatalogError):
    """Network-level failure while downloading a response"""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Error downloading data : {url} : {reason}")


class ParseFailure(CatalogError):
    """Response body is not well-formed XML"""


class EmptyResponse(CatalogError):
    """Parsed response carries no data or no item collection"""


class ProviderRejected(CatalogError):
    """The service flagged the request as invalid"""

    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(f"API ERROR ({code}) : {message}")


class MalformedInput(CatalogError):
    """A request could not be built or signed from the given input"""


InvalidRequest = MalformedInput


class ErrorLog:
    """
    Ordered log of human-readable error strings.

    Entries are only removed by clear(), or by dropping the oldest
    entries once a bounded log is full.
    """

    def __init__(self, maxlen: Optional[int] = None):
        self._entries = deque(maxlen=maxlen)

    def add(self, error) -> None:
        self._entries.append(str(error))

    def entries(self) -> List[str]:
        return list(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(list(self._entries))
