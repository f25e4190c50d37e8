"""
Unit tests for the httpfacade exception hierarchy.
"""

from pathlib import Path

import pytest
import requests

from httpfacade.exceptions import (
    ConfigurationError,
    ConfigurationValidationError,
    DecodingError,
    EncodingError,
    ExceptionContext,
    HttpFacadeError,
    InvalidConfigurationError,
    LocalIOError,
    MultipartEncodingError,
    ProxyResolutionError,
    RequestTimeoutError,
    TransportError,
    UnexpectedStatusError,
)
from httpfacade.exceptions.templates import ErrorCodes


@pytest.mark.unit
class TestHttpFacadeError:
    """Test the base HttpFacadeError class."""

    def test_basic_error(self):
        error = HttpFacadeError("Something failed")

        assert str(error) == "Something failed"
        assert error.help_text is None
        assert error.error_code is None
        assert error.context == {}
        assert len(error.correlation_id) == 8

    def test_error_with_context(self):
        context = ExceptionContext(help_text="Try again", error_code="X_001", context={"k": "v"})
        error = HttpFacadeError("Something failed", context)

        assert "Try again" in str(error)
        assert error.error_code == "X_001"
        assert error.context == {"k": "v"}

    def test_to_dict(self):
        error = HttpFacadeError("Something failed").add_context(uri="http://x")

        data = error.to_dict()
        assert data["error_type"] == "HttpFacadeError"
        assert data["message"] == "Something failed"
        assert data["context"] == {"uri": "http://x"}
        assert "timestamp" in data

    def test_context_dict_not_shared(self):
        shared = ExceptionContext(context={"a": 1})
        first = HttpFacadeError("one", shared)
        first.add_context(b=2)

        assert shared.context == {"a": 1}


@pytest.mark.unit
class TestTransportErrors:
    """Test transport and status errors."""

    def test_transport_error_carries_cause(self):
        cause = requests.exceptions.ConnectionError("connection refused")
        error = TransportError("http://api.example.com/x", cause, "POST")

        assert error.cause is cause
        assert error.uri == "http://api.example.com/x"
        assert error.method == "POST"
        assert error.error_code == ErrorCodes.TRANSPORT_FAILED
        assert "connection refused" in error.message

    def test_timeout_and_proxy_errors_are_transport_errors(self):
        timeout = RequestTimeoutError("http://x", requests.exceptions.ReadTimeout("slow"))
        proxy = ProxyResolutionError("http://x", LookupError("no route"))

        assert isinstance(timeout, TransportError)
        assert isinstance(proxy, TransportError)
        assert timeout.error_code == ErrorCodes.TRANSPORT_TIMEOUT
        assert proxy.error_code == ErrorCodes.TRANSPORT_PROXY
        assert "timed out" in timeout.message
        assert "Proxy resolution" in proxy.message

    def test_unexpected_status_message(self):
        error = UnexpectedStatusError("http://api.example.com/x", 404, "GET", "Not Found")

        assert error.status_code == 404
        assert error.uri == "http://api.example.com/x"
        assert str(error) == "http get error: uri=http://api.example.com/x, statusCode=404"
        assert error.context["status_code"] == 404
        assert error.technical_details == "HTTP 404 Not Found"


@pytest.mark.unit
class TestCodecAndStorageErrors:
    """Test codec and local file errors."""

    def test_encoding_error(self):
        error = EncodingError("json", TypeError("not serializable"))

        assert error.format == "json"
        assert error.error_code == ErrorCodes.REQUEST_ENCODING
        assert "not serializable" in error.message

    def test_multipart_error_is_encoding_error(self):
        error = MultipartEncodingError("upload", ValueError("name contains a line break"))

        assert isinstance(error, EncodingError)
        assert error.field == "upload"
        assert error.format == "multipart"
        assert error.error_code == ErrorCodes.REQUEST_MULTIPART
        assert "'upload'" in error.message

    def test_decoding_error(self):
        error = DecodingError("xml", "http://x", ValueError("bad"))

        assert error.uri == "http://x"
        assert error.error_code == ErrorCodes.RESPONSE_DECODING

    def test_local_io_error(self):
        error = LocalIOError("/tmp/out/file.bin", "create", FileNotFoundError("missing"))

        assert error.path == Path("/tmp/out/file.bin")
        assert error.operation == "create"
        assert "Cannot create" in error.message

    def test_every_error_is_facade_error(self):
        errors = [
            TransportError("u", OSError()),
            UnexpectedStatusError("u", 500),
            EncodingError("xml", TypeError()),
            DecodingError("json", "u", ValueError()),
            LocalIOError("p", "write", OSError()),
            ConfigurationError("bad"),
        ]
        assert all(isinstance(error, HttpFacadeError) for error in errors)


@pytest.mark.unit
class TestConfigurationErrors:
    """Test configuration errors."""

    def test_invalid_configuration(self):
        error = InvalidConfigurationError("http.timeout", "abc", "must be a number")

        assert error.field == "http.timeout"
        assert "'abc'" in error.message
        assert error.help_text

    def test_validation_error_lists_errors(self):
        error = ConfigurationValidationError(["a: bad", "b: worse"])

        assert error.errors == ["a: bad", "b: worse"]
        assert "  - a: bad" in error.message
