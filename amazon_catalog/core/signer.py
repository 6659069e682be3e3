"""
REST request signing for the Product Advertising web service

Turns an unsigned request URL into a timestamped, canonically ordered and
HMAC-SHA256 signed URL. For a fixed parameter set and a fixed timestamp the
output is deterministic; in normal use the Timestamp parameter changes every
second, so signed URLs are single-use.
"""

import base64
import hashlib
import hmac
from datetime import datetime, timezone
from typing import Dict, Mapping, Optional
from urllib.parse import parse_qsl, quote, urlsplit

from amazon_catalog.core.errors import MalformedInput

DEFAULT_API_VERSION = "2011-08-01"

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def format_timestamp(moment: Optional[datetime] = None) -> str:
    """Format a moment (default: now) as a UTC timestamp"""
    if moment is None:
        moment = datetime.now(timezone.utc)
    elif moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.strftime(TIMESTAMP_FORMAT)


def percent_encode(value: str) -> str:
    """RFC 3986 encoding; tildes stay literal"""
    return quote(str(value), safe="-_.~").replace("%7E", "~")


def canonical_query(parameters: Mapping[str, str]) -> str:
    """Sorted, percent-encoded key=value pairs joined with '&'"""
    return "&".join(
        f"{percent_encode(key)}={percent_encode(parameters[key])}"
        for key in sorted(parameters)
    )


def decode_query(query: str) -> Dict[str, str]:
    """Decode a query string; the last occurrence of a repeated key wins"""
    return dict(parse_qsl(query, keep_blank_values=True))


def compute_signature(secret_key: str, host: str, path: str, query: str) -> str:
    """Base64 HMAC-SHA256 over the canonical GET request, URL-encoded"""
    payload = f"GET\n{host}\n{path}\n{query}"
    digest = hmac.new(
        secret_key.encode("utf-8"),
        payload.encode("utf-8"),
        hashlib.sha256
    ).digest()
    return quote(base64.b64encode(digest).decode("ascii"), safe="")


def sign_parameters(
    secret_key: str,
    host: str,
    path: str,
    parameters: Mapping[str, str],
    access_key: Optional[str] = None,
    version: str = DEFAULT_API_VERSION,
    *,
    timestamp: Optional[datetime] = None,
    scheme: str = "http"
) -> str:
    """
    Sign a parameter mapping for the given host and path

    Args:
        secret_key: AWS secret key used as the HMAC key
        host: Endpoint host, e.g. webservices.amazon.com
        path: Endpoint path, e.g. /onca/xml
        parameters: Query parameters; the mapping is not modified
        access_key: Overrides AWSAccessKeyId when non-empty
        version: API version sent as the Version parameter
        timestamp: Moment to stamp the request with (default: now)
        scheme: Scheme of the returned URL

    Returns:
        Fully signed request URL
    """
    params = dict(parameters)
    params["Timestamp"] = format_timestamp(timestamp)
    params["Version"] = version
    if access_key:
        params["AWSAccessKeyId"] = access_key

    query = canonical_query(params)
    signature = compute_signature(secret_key, host, path, query)

    return f"{scheme}://{host}{path}?{query}&Signature={signature}"


def sign_request(
    secret_key: str,
    request_url: str,
    access_key: Optional[str] = None,
    version: str = DEFAULT_API_VERSION,
    *,
    timestamp: Optional[datetime] = None,
    scheme: Optional[str] = "http"
) -> str:
    """
    Re-sign an existing request URL

    The returned URL uses http:// by default whatever the scheme of
    request_url. Pass scheme=None to keep the original scheme.

    Raises:
        MalformedInput: request_url has no host or no query string
    """
    parts = urlsplit(request_url)
    if not parts.netloc:
        raise MalformedInput(f"Request URL has no host: {parts.path or request_url!r}")
    if not parts.query:
        raise MalformedInput(
            f"Request URL has no query string: {parts.scheme}://{parts.netloc}{parts.path}"
        )

    return sign_parameters(
        secret_key,
        parts.netloc,
        parts.path or "/",
        decode_query(parts.query),
        access_key=access_key,
        version=version,
        timestamp=timestamp,
        scheme=scheme or parts.scheme or "http"
    )
