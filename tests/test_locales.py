import pytest

from amazon_catalog.config.locales import (
    ENDPOINT_PATH,
    LOCALE_ENDPOINTS,
    get_locale_endpoint,
    normalize_locale,
    resolve_endpoint,
)
from amazon_catalog.config.search_indexes import VALID_SEARCH_NAMES, Condition


@pytest.mark.parametrize("locale", sorted(LOCALE_ENDPOINTS))
def test_every_supported_locale_resolves_to_its_table_entry(locale):
    endpoint = resolve_endpoint(locale)

    assert endpoint.locale == locale
    assert endpoint.host == LOCALE_ENDPOINTS[locale]
    assert endpoint.path == ENDPOINT_PATH
    assert endpoint.base_url == f"http://{LOCALE_ENDPOINTS[locale]}/onca/xml"


@pytest.mark.parametrize("locale", ["xx", "", "au", None, "united-kingdom"])
def test_unknown_locale_falls_back_to_us(locale):
    endpoint = resolve_endpoint(locale)

    assert endpoint.locale == "us"
    assert endpoint.host == "webservices.amazon.com"


def test_ssl_switches_scheme_only():
    plain = resolve_endpoint("uk")
    secure = resolve_endpoint("uk", use_ssl=True)

    assert plain.scheme == "http"
    assert secure.scheme == "https"
    assert secure.base_url == "https://webservices.amazon.co.uk/onca/xml"
    assert (plain.host, plain.path) == (secure.host, secure.path)


def test_locale_codes_are_case_and_whitespace_insensitive():
    assert normalize_locale(" DE ") == "de"
    assert get_locale_endpoint("JP") == ("webservices.amazon.jp", "/onca/xml")


def test_search_names_and_conditions():
    assert len(VALID_SEARCH_NAMES) == 39
    assert VALID_SEARCH_NAMES[0] == "All"
    assert "Apparel" in VALID_SEARCH_NAMES
    assert [c.value for c in Condition] == ["New", "Used", "Collectible", "Refurbished", "All"]
