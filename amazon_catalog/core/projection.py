"""Projection of parsed responses into flat item records"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional
import logging

from amazon_catalog.core.document import Document
from amazon_catalog.core.errors import CatalogError, EmptyResponse, ErrorLog, ProviderRejected

logger = logging.getLogger(__name__)

NO_RESPONSE = "No XML response found from AWS."
NO_ITEMS = "No items found."

# Legacy record keys, in output order
_RECORD_KEYS = {
    'asin': 'asin',
    'url': 'url',
    'rrp': 'rrp',
    'title': 'title',
    'lowest_price': 'lowestPrice',
    'large_image': 'largeImage',
    'medium_image': 'mediumImage',
    'small_image': 'smallImage',
}


@dataclass(frozen=True)
class CatalogItem:
    asin: str
    url: str
    rrp: float
    title: str
    lowest_price: float
    large_image: str
    medium_image: str
    small_image: str

    def to_dict(self) -> Dict[str, Any]:
        """Flat record with the legacy camelCase keys"""
        data = asdict(self)
        return {legacy: data[field] for field, legacy in _RECORD_KEYS.items()}


def _price(node: Document, path: str) -> float:
    # Amounts are integer minor units (cents, pence, ...)
    return node.number(path) / 100.0


def parse_item(node: Document) -> CatalogItem:
    """Extract one item; missing fields fall back to defaults"""
    if node.exists('OfferSummary'):
        lowest_price = _price(node, 'OfferSummary/LowestNewPrice/Amount')
    else:
        lowest_price = 0.0

    return CatalogItem(
        asin=node.text('ASIN'),
        url=node.text('DetailPageURL'),
        rrp=_price(node, 'ItemAttributes/ListPrice/Amount'),
        title=node.text('ItemAttributes/Title'),
        lowest_price=lowest_price,
        large_image=node.text('LargeImage/URL'),
        medium_image=node.text('MediumImage/URL'),
        small_image=node.text('SmallImage/URL'),
    )


def check_request(document: Optional[Document]) -> Optional[CatalogError]:
    """
    Validate a response document before projecting it

    Returns:
        The error for the first failed check, or None if valid
    """
    if document is None or document.is_empty():
        return EmptyResponse(NO_RESPONSE)

    if not document.exists('Items'):
        return EmptyResponse(NO_ITEMS)

    if document.text('Items/Request/IsValid') != 'True':
        return ProviderRejected(
            code=document.text('Items/Request/Errors/Error/Code'),
            message=document.text('Items/Request/Errors/Error/Message'),
        )

    return None


def project_items(document: Optional[Document], error_log: ErrorLog) -> List[CatalogItem]:
    """
    Flatten a response into CatalogItems in document order

    Document-level problems add one entry to error_log and yield an
    empty list. Items are never dropped once the document is valid.
    """
    error = check_request(document)
    if error is not None:
        logger.error(error)
        error_log.add(error)
        return []

    items = [parse_item(node) for node in document.find_all('Items/Item')]
    logger.debug(f"Projected {len(items)} items")
    return items
