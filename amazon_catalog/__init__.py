"""Signed REST client for the Amazon Product Advertising catalog"""

from amazon_catalog.config.locales import ResolvedEndpoint, resolve_endpoint
from amazon_catalog.config.search_indexes import VALID_SEARCH_NAMES, Condition
from amazon_catalog.config.settings import Settings, settings
from amazon_catalog.core.catalog_client import CatalogClient, ItemList, RawDocument, Response
from amazon_catalog.core.document import Document, parse_document
from amazon_catalog.core.errors import (
    CatalogError,
    ErrorLog,
    InvalidRequest,
    MalformedInput,
    ParseFailure,
    ProviderRejected,
    TransportFailure,
    TransportUnavailable,
)
from amazon_catalog.core.projection import CatalogItem, project_items
from amazon_catalog.core.signer import DEFAULT_API_VERSION, sign_parameters, sign_request
from amazon_catalog.core.transport import RequestsTransport
from amazon_catalog.utils.logger import setup_logging

__version__ = "0.1.0"

__all__ = [
    "CatalogClient",
    "CatalogError",
    "CatalogItem",
    "Condition",
    "DEFAULT_API_VERSION",
    "Document",
    "ErrorLog",
    "InvalidRequest",
    "ItemList",
    "MalformedInput",
    "ParseFailure",
    "ProviderRejected",
    "RawDocument",
    "RequestsTransport",
    "ResolvedEndpoint",
    "Response",
    "Settings",
    "TransportFailure",
    "TransportUnavailable",
    "VALID_SEARCH_NAMES",
    "parse_document",
    "project_items",
    "resolve_endpoint",
    "settings",
    "setup_logging",
    "sign_parameters",
    "sign_request",
]
