"""Locale-specific endpoints for the Product Advertising web service"""

from dataclasses import dataclass
from typing import Tuple

DEFAULT_LOCALE = "us"

ENDPOINT_PATH = "/onca/xml"

# One endpoint host per locale
LOCALE_ENDPOINTS = {
    "ca": "webservices.amazon.ca",
    "cn": "webservices.amazon.cn",
    "de": "webservices.amazon.de",
    "es": "webservices.amazon.es",
    "fr": "webservices.amazon.fr",
    "it": "webservices.amazon.it",
    "jp": "webservices.amazon.jp",
    "uk": "webservices.amazon.co.uk",
    "us": "webservices.amazon.com",
}


@dataclass(frozen=True)
class ResolvedEndpoint:
    locale: str
    host: str
    path: str
    scheme: str

    @property
    def base_url(self) -> str:
        return f"{self.scheme}://{self.host}{self.path}"


def normalize_locale(locale: str) -> str:
    """Return the effective locale code, substituting 'us' for unknown codes"""
    code = (locale or "").strip().lower()
    if code not in LOCALE_ENDPOINTS:
        return DEFAULT_LOCALE
    return code


def get_locale_endpoint(locale: str) -> Tuple[str, str]:
    """Get (host, path) for a locale"""
    return LOCALE_ENDPOINTS[normalize_locale(locale)], ENDPOINT_PATH


def resolve_endpoint(locale: str, use_ssl: bool = False) -> ResolvedEndpoint:
    """
    Resolve a locale code to its service endpoint.

    Never fails: an unrecognized code resolves to the 'us' endpoint.
    """
    code = normalize_locale(locale)
    host, path = get_locale_endpoint(code)
    return ResolvedEndpoint(
        locale=code,
        host=host,
        path=path,
        scheme="https" if use_ssl else "http",
    )
