import json
import logging
from unittest.mock import MagicMock

import pytest
import requests

from amazon_catalog.core.errors import TransportFailure, TransportUnavailable
from amazon_catalog.core.transport import RequestsTransport
from amazon_catalog.utils.logger import StructuredFormatter, redact_url, setup_logging

SIGNED_URL = (
    "http://webservices.amazon.com/onca/xml?AWSAccessKeyId=AKID&Operation=ItemSearch"
    "&Timestamp=2024-03-09T14%3A05%3A07Z&Signature=abc%2Bdef%3D"
)


def test_transport_returns_body_regardless_of_status():
    session = MagicMock()
    session.get.return_value = MagicMock(status_code=400, content=b"<ItemSearchErrorResponse/>")
    transport = RequestsTransport(timeout=5, session=session)

    assert transport.get(SIGNED_URL) == b"<ItemSearchErrorResponse/>"
    session.get.assert_called_once_with(SIGNED_URL, timeout=5)


def test_transport_wraps_network_errors_without_query():
    session = MagicMock()
    session.get.side_effect = requests.ConnectionError("name resolution failed")
    transport = RequestsTransport(session=session)

    with pytest.raises(TransportFailure) as info:
        transport.get(SIGNED_URL)

    assert info.value.url == "http://webservices.amazon.com/onca/xml"
    assert "name resolution failed" in str(info.value)
    assert "AKID" not in str(info.value)


def test_closed_transport_is_unavailable():
    transport = RequestsTransport()
    transport.close()

    with pytest.raises(TransportUnavailable):
        transport.get(SIGNED_URL)


def test_shared_session_is_not_closed():
    session = MagicMock()
    RequestsTransport(session=session).close()

    session.close.assert_not_called()


def test_redact_url_strips_query():
    assert redact_url(SIGNED_URL) == "http://webservices.amazon.com/onca/xml"
    assert redact_url("/onca/xml?a=b") == "/onca/xml"


def test_structured_formatter_emits_json():
    record = logging.LogRecord("amazon_catalog.core", logging.ERROR, __file__, 10, "ItemSearch failed", None, None)
    record.operation = "ItemSearch"
    record.locale = "uk"

    data = json.loads(StructuredFormatter().format(record))

    assert data["level"] == "ERROR"
    assert data["message"] == "ItemSearch failed"
    assert data["operation"] == "ItemSearch"
    assert data["locale"] == "uk"
    assert "error_type" not in data


def test_setup_logging_configures_root_logger():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        setup_logging(level="debug", structured=True)

        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, StructuredFormatter)
        assert logging.getLogger("urllib3").level == logging.WARNING
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
