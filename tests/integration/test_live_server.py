"""
End-to-end tests against a local threaded HTTP server.

The server also answers absolute-form request targets, so it doubles as a
plain HTTP proxy for the proxy routing tests.
"""

import json
import threading
import time
from datetime import timedelta
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import urlsplit

import pytest

from httpfacade import (
    MultipartField,
    RequestTimeoutError,
    StaticProxyResolver,
    TransportError,
    UnexpectedStatusError,
    download_file,
    get_body,
    get_json,
    post_json_into,
    post_multipart_form,
    post_xml_into,
    set_proxy,
    set_timeout,
)

BLOB = bytes(range(256)) * 400
PROXY_ENV_VARS = ["HTTP_PROXY", "HTTPS_PROXY", "ALL_PROXY", "NO_PROXY", "http_proxy", "https_proxy", "all_proxy", "no_proxy"]


class _Handler(BaseHTTPRequestHandler):
    protocol_version = "HTTP/1.1"

    def log_message(self, format, *args):
        pass

    def _reply(self, status, body=b"", content_type="application/octet-stream"):
        self.send_response(status)
        self.send_header("Content-Type", content_type)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def _drip(self, count, interval):
        self.send_response(200)
        self.send_header("Content-Type", "application/octet-stream")
        self.send_header("Content-Length", str(count))
        self.end_headers()
        try:
            for _ in range(count):
                self.wfile.write(b"x")
                self.wfile.flush()
                time.sleep(interval)
        except (BrokenPipeError, ConnectionResetError):
            pass

    def _route(self):
        target = urlsplit(self.path)
        return target.netloc, target.path

    def do_GET(self):
        host, path = self._route()
        if path == "/slow":
            time.sleep(0.3)
            try:
                self._reply(200, b"late")
            except (BrokenPipeError, ConnectionResetError):
                pass
        elif path == "/drip":
            self._drip(10, 0.25)
        elif path.startswith("/status/"):
            self._reply(int(path.rsplit("/", 1)[1]), b"status body")
        elif path == "/bytes":
            self._reply(200, BLOB)
        elif path == "/json":
            payload = {"path": path, "host": host or self.headers.get("Host"), "proxied": bool(host)}
            self._reply(200, json.dumps(payload).encode(), "application/json")
        else:
            self._reply(404)

    def do_POST(self):
        _, path = self._route()
        body = self.rfile.read(int(self.headers.get("Content-Length", 0)))
        if path == "/echo":
            self._reply(200, body, self.headers.get("Content-Type", "application/octet-stream"))
        elif path.startswith("/status/"):
            self._reply(int(path.rsplit("/", 1)[1]))
        else:
            self._reply(404)


@pytest.fixture(scope="module")
def server():
    httpd = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    httpd.daemon_threads = True
    thread = threading.Thread(target=httpd.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{httpd.server_port}"
    httpd.shutdown()
    httpd.server_close()


@pytest.fixture(autouse=True)
def no_proxy_env(monkeypatch):
    for name in PROXY_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.mark.integration
class TestTimeouts:
    """Test the global timeout against a slow endpoint."""

    def test_slow_endpoint_times_out(self, server):
        set_timeout(0.1)

        with pytest.raises(RequestTimeoutError) as exc_info:
            get_body(f"{server}/slow")

        assert isinstance(exc_info.value, TransportError)

    def test_generous_timeout_succeeds(self, server):
        set_timeout(timedelta(seconds=5))

        assert get_body(f"{server}/slow") == b"late"

    def test_slow_body_hits_deadline(self, server):
        set_timeout(1)
        started = time.monotonic()

        with pytest.raises(RequestTimeoutError):
            get_body(f"{server}/drip")

        assert time.monotonic() - started < 2.0

    def test_slow_download_hits_deadline(self, server, temp_dir):
        set_timeout(1)
        dest = temp_dir / "drip.bin"

        with pytest.raises(RequestTimeoutError):
            download_file(dest, f"{server}/drip")

        assert len(dest.read_bytes()) < 10

    def test_slow_body_within_deadline(self, server):
        set_timeout(5)

        assert get_body(f"{server}/drip") == b"x" * 10

    def test_no_timeout(self, server):
        set_timeout(0)

        assert get_body(f"{server}/slow") == b"late"


@pytest.mark.integration
class TestRoundTrips:
    """Test helpers against real sockets."""

    def test_get_body(self, server):
        assert get_body(f"{server}/bytes") == BLOB

    def test_json_echo(self, server):
        body = {"symbol": "GC", "levels": [1, 2, 3], "note": "<&>", "meta": {"live": False}}

        assert post_json_into(f"{server}/echo", body) == body

    def test_xml_echo(self, server):
        root = post_xml_into(f"{server}/echo", {"order": {"@id": "9", "line": ["a", "b"]}})

        assert root.get("id") == "9"
        assert [line.text for line in root.findall("line")] == ["a", "b"]

    def test_multipart_echo(self, server):
        body = post_multipart_form(
            [
                MultipartField("f1", b"hi", "a.txt", "text/plain"),
                MultipartField("f2", b"there"),
            ],
            f"{server}/echo",
        )

        first = body.index(b'Content-Disposition: form-data; name="f1"; filename="a.txt"; filelength=2')
        second = body.index(b'Content-Disposition: form-data; name="f2"; filename=""; filelength=5')
        assert first < second
        assert b"\r\n\r\nhi\r\n" in body

    @pytest.mark.parametrize("status", [404, 500])
    def test_status_errors(self, server, status):
        with pytest.raises(UnexpectedStatusError) as exc_info:
            get_json(f"{server}/status/{status}")

        assert exc_info.value.status_code == status

    def test_download(self, server, temp_dir):
        dest = download_file(temp_dir / "blob.bin", f"{server}/bytes")

        assert dest.read_bytes() == BLOB

    def test_download_not_found(self, server, temp_dir):
        dest = temp_dir / "absent.bin"

        with pytest.raises(UnexpectedStatusError):
            download_file(dest, f"{server}/status/404")

        assert not dest.exists()


@pytest.mark.integration
class TestProxyRouting:
    """Test that resolved proxies carry the request."""

    def test_request_routed_through_proxy(self, server):
        set_proxy(StaticProxyResolver(server))

        payload = get_json("http://example.invalid/json")

        assert payload == {"path": "/json", "host": "example.invalid", "proxied": True}

    def test_resolver_returning_none_connects_directly(self, server):
        set_proxy(lambda request: None)

        payload = get_json(f"{server}/json")

        assert payload["proxied"] is False

    def test_unreachable_host_without_proxy(self):
        set_timeout(2)

        with pytest.raises(TransportError):
            get_body("http://127.0.0.1:1/unreachable")
