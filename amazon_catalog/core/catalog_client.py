"""Amazon Product Advertising catalog client (REST/XML interface)"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Union
from urllib.parse import quote, urlencode
import logging
import time

from amazon_catalog.config.locales import DEFAULT_LOCALE, ResolvedEndpoint, normalize_locale, resolve_endpoint
from amazon_catalog.config.search_indexes import VALID_SEARCH_NAMES, Condition
from amazon_catalog.config.settings import Settings, settings as default_settings
from amazon_catalog.core.document import Document, parse_document
from amazon_catalog.core.errors import CatalogError, ErrorLog, MalformedInput
from amazon_catalog.core.projection import CatalogItem, check_request, project_items
from amazon_catalog.core.signer import sign_request
from amazon_catalog.core.transport import RequestsTransport
from amazon_catalog.utils.metrics import metrics

logger = logging.getLogger(__name__)

SERVICE_NAME = "AWSECommerceService"

SEARCH_RESPONSE_GROUP = "ItemAttributes,Offers,Images"
LOOKUP_RESPONSE_GROUP = "ItemAttributes,Offers,Reviews,Images,EditorialReview"
LOOKUP_REVIEW_SORT = "-OverallRating"


@dataclass(frozen=True)
class RawDocument:
    """Parsed response returned as-is (array retrieval off)"""
    document: Document


@dataclass(frozen=True)
class ItemList:
    """Projected items (array retrieval on)"""
    items: List[CatalogItem]

    def to_dicts(self) -> List[dict]:
        return [item.to_dict() for item in self.items]


Response = Union[RawDocument, ItemList]


class CatalogClient:
    """
    Client for the ItemSearch and ItemLookup operations

    Features:
    - Signed REST requests for every supported locale
    - Optional projection of responses into flat CatalogItems
    - Failures recorded in a per-client error log instead of raised

    Calls return None on failure; inspect get_errors() afterwards.

    Configuration (locale, SSL, array retrieval) and the error log are
    unsynchronized instance state. Use one client per thread, or guard
    configuration changes externally.
    """

    def __init__(
        self,
        access_key_id: str,
        secret_key: str,
        associate_tag: str,
        *,
        locale: Optional[str] = None,
        use_ssl: Optional[bool] = None,
        retrieve_as_array: Optional[bool] = None,
        transport=None,
        settings: Optional[Settings] = None
    ):
        self._settings = settings or default_settings

        # Credentials are never mutated or logged
        self._access_key_id = access_key_id
        self._secret_key = secret_key
        self._associate_tag = associate_tag

        self._use_ssl = self._settings.use_ssl if use_ssl is None else use_ssl
        self._retrieve_as_array = (
            self._settings.retrieve_as_array if retrieve_as_array is None else retrieve_as_array
        )
        self._locale = DEFAULT_LOCALE
        self.set_locale(locale or self._settings.amazon_locale)

        self.transport = transport or RequestsTransport(timeout=self._settings.request_timeout)
        self.errors = ErrorLog(maxlen=self._settings.error_log_limit)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None, **kwargs) -> "CatalogClient":
        """Build a client from environment configuration"""
        settings = settings or default_settings
        if not settings.has_credentials:
            logger.warning("Amazon credentials are not configured")
        return cls(
            settings.amazon_access_key,
            settings.amazon_secret_key,
            settings.amazon_associate_tag,
            settings=settings,
            **kwargs
        )

    # Configuration

    def set_locale(self, locale: str):
        """Select the service endpoint; unknown codes fall back to 'us'"""
        effective = normalize_locale(locale)
        if effective != (locale or "").strip().lower():
            logger.info(f"Unknown locale {locale!r}, using '{effective}'")
        self._locale = effective

    def set_ssl(self, use_ssl: bool = True):
        self._use_ssl = use_ssl

    def set_retrieve_as_array(self, retrieve_array: bool = True):
        self._retrieve_as_array = retrieve_array

    @property
    def locale(self) -> str:
        return self._locale

    @property
    def use_ssl(self) -> bool:
        return self._use_ssl

    @property
    def retrieve_as_array(self) -> bool:
        return self._retrieve_as_array

    @property
    def endpoint(self) -> ResolvedEndpoint:
        return resolve_endpoint(self._locale, self._use_ssl)

    @property
    def base_url(self) -> str:
        return self.endpoint.base_url

    # Queries

    def get_errors(self) -> List[str]:
        return self.errors.entries()

    def clear_errors(self):
        self.errors.clear()

    @staticmethod
    def get_valid_search_names() -> List[str]:
        return list(VALID_SEARCH_NAMES)

    # Operations

    def item_search(
        self,
        keywords: str,
        search_index: Optional[str] = None,
        sort_by_sales_rank: bool = True,
        condition: Union[Condition, str] = Condition.NEW
    ) -> Optional[Response]:
        """
        Search for items

        Args:
            keywords: Keywords to search for
            search_index: Category to search in, None to search all
            sort_by_sales_rank: Sort by sales rank (ignored for 'All')
            condition: New, Used, Collectible, Refurbished or All.
                Passed through unchecked.

        Returns:
            RawDocument or ItemList, None on failure
        """
        if not keywords or not str(keywords).strip():
            return self._fail("ItemSearch", MalformedInput("ItemSearch requires keywords"))

        if isinstance(condition, Condition):
            condition = condition.value

        params = {
            'Operation': 'ItemSearch',
            'Keywords': keywords,
            'ResponseGroup': SEARCH_RESPONSE_GROUP,
            'Condition': condition,
        }

        if not search_index:
            params['SearchIndex'] = 'All'
        else:
            params['SearchIndex'] = search_index
            if sort_by_sales_rank and search_index != 'All':
                params['Sort'] = 'salesrank'

        logger.info(f"ItemSearch: '{keywords}' in {params['SearchIndex']}")
        return self._execute("ItemSearch", params)

    def item_lookup(
        self,
        item_ids: Union[str, int, Sequence[str]],
        only_from_amazon: bool = False
    ) -> Optional[Response]:
        """
        Look up items by ASIN

        Args:
            item_ids: A single ASIN (or ISBN) or a list/tuple of them
            only_from_amazon: Only offers sold by Amazon, not 3rd party vendors

        Returns:
            RawDocument or ItemList, None on failure
        """
        if isinstance(item_ids, (list, tuple)):
            item_ids = ','.join(str(item_id) for item_id in item_ids)
        elif item_ids is not None:
            item_ids = str(item_ids)

        if not item_ids:
            return self._fail("ItemLookup", MalformedInput("ItemLookup requires at least one item id"))

        params = {
            'ItemId': item_ids,
            'Operation': 'ItemLookup',
            'ResponseGroup': LOOKUP_RESPONSE_GROUP,
            'ReviewSort': LOOKUP_REVIEW_SORT,
            'MerchantId': 'Amazon' if only_from_amazon else 'All',
        }

        logger.info(f"ItemLookup: {item_ids}")
        return self._execute("ItemLookup", params)

    # Request plumbing

    def build_request_url(self, params: Dict[str, str]) -> str:
        """Unsigned request URL for the current endpoint"""
        query = {
            'Service': SERVICE_NAME,
            'AssociateTag': self._associate_tag,
            'AWSAccessKeyId': self._access_key_id,
        }
        query.update(params)
        return f"{self.base_url}?{urlencode(query, quote_via=quote)}"

    def sign(self, request_url: str) -> str:
        scheme = "http" if self._settings.pin_signed_url_to_http else None
        return sign_request(
            self._secret_key,
            request_url,
            version=self._settings.api_version,
            scheme=scheme
        )

    def _execute(self, operation: str, params: Dict[str, str]) -> Optional[Response]:
        start_time = time.perf_counter()
        try:
            signed_url = self.sign(self.build_request_url(params))
            body = self.transport.get(signed_url)
            document = parse_document(body)
        except CatalogError as e:
            return self._fail(operation, e)
        finally:
            metrics.record_api_duration(operation, time.perf_counter() - start_time)

        if not self._retrieve_as_array:
            metrics.record_api_call(operation, "success")
            return RawDocument(document)

        error = check_request(document)
        if error is not None:
            self._fail(operation, error)
            return ItemList([])

        metrics.record_api_call(operation, "success")
        return ItemList(project_items(document, self.errors))

    def _fail(self, operation: str, error: CatalogError) -> None:
        logger.error(
            f"{operation} failed on {self.base_url}: {error}",
            extra={'operation': operation, 'locale': self._locale, 'error_type': type(error).__name__}
        )
        metrics.record_api_call(operation, "error")
        metrics.record_error(operation, error)
        self.errors.add(error)
        return None

    # Resources

    def close(self):
        close = getattr(self.transport, "close", None)
        if close is not None:
            close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
