import pytest

from amazon_catalog.config.settings import Settings
from amazon_catalog.core.catalog_client import CatalogClient
from amazon_catalog.core.errors import TransportFailure
from amazon_catalog.utils.logger import redact_url

ACCESS_KEY = "AKIDEXAMPLE000000000"
SECRET_KEY = "wJalrXUtnFEMI/K7MDENG+bPxRfiCYEXAMPLEKEY"
ASSOCIATE_TAG = "mytag-21"

NAMESPACE = "http://webservices.amazon.com/AWSECommerceService/2011-08-01"


def _item(asin, title, list_price=None, lowest_new=None, offer_summary=True, images=True):
    list_price_xml = (
        f"<ListPrice><Amount>{list_price}</Amount><CurrencyCode>GBP</CurrencyCode></ListPrice>"
        if list_price is not None else ""
    )
    if offer_summary:
        lowest_xml = (
            f"<LowestNewPrice><Amount>{lowest_new}</Amount></LowestNewPrice>"
            if lowest_new is not None else ""
        )
        offer_xml = f"<OfferSummary>{lowest_xml}<TotalNew>3</TotalNew></OfferSummary>"
    else:
        offer_xml = ""
    images_xml = (
        f"<SmallImage><URL>https://images.example/{asin}._SL75_.jpg</URL></SmallImage>"
        f"<MediumImage><URL>https://images.example/{asin}._SL160_.jpg</URL></MediumImage>"
        f"<LargeImage><URL>https://images.example/{asin}.jpg</URL></LargeImage>"
        if images else ""
    )
    return (
        f"<Item><ASIN>{asin}</ASIN>"
        f"<DetailPageURL>https://www.amazon.co.uk/dp/{asin}</DetailPageURL>"
        f"{images_xml}"
        f"<ItemAttributes><Title>{title}</Title>{list_price_xml}</ItemAttributes>"
        f"{offer_xml}</Item>"
    )


def make_response(items, operation="ItemSearch", valid=True, error=None):
    """Build a namespaced Product Advertising XML response"""
    errors_xml = ""
    if error is not None:
        code, message = error
        errors_xml = f"<Errors><Error><Code>{code}</Code><Message>{message}</Message></Error></Errors>"
    return (
        f'<?xml version="1.0" encoding="UTF-8"?>'
        f'<{operation}Response xmlns="{NAMESPACE}">'
        f"<OperationRequest><RequestId>abc-123</RequestId></OperationRequest>"
        f"<Items><Request><IsValid>{'True' if valid else 'False'}</IsValid>{errors_xml}</Request>"
        f"{''.join(items)}</Items>"
        f"</{operation}Response>"
    ).encode("utf-8")


SEARCH_RESPONSE = make_response([
    _item("B000SOCK01", "Merino Wool Socks", list_price=1999, lowest_new=1450),
    _item("B000SOCK02", "Hiking Socks", list_price=899, offer_summary=False),
    _item("B000SOCK03", "Plain Socks", images=False),
])

INVALID_RESPONSE = make_response(
    [],
    operation="ItemLookup",
    valid=False,
    error=("AWS.InvalidParameterValue", "B000BAD is not a valid value for ItemId."),
)


class FakeTransport:
    """Records requested URLs and replays a canned body"""

    def __init__(self, body=SEARCH_RESPONSE, error=None):
        self.body = body
        self.error = error
        self.urls = []
        self.closed = False

    def get(self, url):
        self.urls.append(url)
        if self.error is not None:
            raise TransportFailure(redact_url(url), self.error)
        return self.body

    def close(self):
        self.closed = True


@pytest.fixture
def test_settings():
    return Settings(_env_file=None, amazon_locale="uk")


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def client(transport, test_settings):
    return CatalogClient(
        ACCESS_KEY,
        SECRET_KEY,
        ASSOCIATE_TAG,
        transport=transport,
        settings=test_settings,
    )
