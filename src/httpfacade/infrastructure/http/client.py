"""
HTTP client bound to one configuration snapshot.

A fresh client, and with it a fresh requests.Session, is built for every
helper call. The client applies the snapshot's timeout as a deadline for
the whole exchange (connect, headers and body), consults its proxy
resolver before anything is sent, and turns transport failures into
httpfacade exceptions.
"""

import time
from typing import Dict, Iterator, Optional
from urllib.parse import urlparse

import requests
from requests.utils import select_proxy
from urllib3.exceptions import HTTPError as Urllib3HTTPError
from urllib3.exceptions import ReadTimeoutError

from ...constants import BODY_CHUNK_SIZE
from ...core.config.store import ClientConfig, get_config
from ...exceptions import ProxyResolutionError, RequestTimeoutError, TransportError
from ...logging import get_logger


def wrap_transport_error(uri: str, method: str, error: Exception) -> TransportError:
    """Map a requests or urllib3 exception onto TransportError or RequestTimeoutError."""
    if isinstance(error, (requests.Timeout, ReadTimeoutError)) or (
        error.args and isinstance(error.args[0], ReadTimeoutError)
    ):
        return RequestTimeoutError(uri, error, method)
    return TransportError(uri, error, method)


class Deadline:
    """Point in time by which a request, body included, must be complete."""

    def __init__(self, timeout: Optional[float]):
        self.timeout = timeout
        self.expires_at = None if timeout is None else time.monotonic() + timeout

    def remaining(self) -> Optional[float]:
        """Seconds left, never negative; None when there is no deadline."""
        if self.expires_at is None:
            return None
        return max(self.expires_at - time.monotonic(), 0.0)

    def expired(self) -> bool:
        return self.expires_at is not None and time.monotonic() >= self.expires_at

    def check(self, uri: str, method: str) -> None:
        """Raise RequestTimeoutError once the deadline has passed."""
        if self.expired():
            raise RequestTimeoutError(uri, TimeoutError(f"deadline of {self.timeout}s exceeded"), method)


class HttpClient:
    """HTTP client applying a ClientConfig to every request it sends.

    Responses are returned with their body unread. Read it with
    ``read_body`` or ``iter_body`` so the deadline also covers the body.
    """

    def __init__(self, config: ClientConfig, session: Optional[requests.Session] = None):
        """Initialize HTTP client with configuration.

        Args:
            config: Configuration snapshot (timeout and proxy resolver)
            session: Optional existing session to use
        """
        self.config = config
        self.timeout = config.timeout
        self.proxy_resolver = config.proxy_resolver
        self.logger = get_logger(f"{__name__}.{self.__class__.__name__}")

        self.session = session or requests.Session()
        # An installed resolver replaces environment proxies
        if self.proxy_resolver is not None:
            self.session.trust_env = False

    def get(
        self,
        uri: str,
        headers: Optional[Dict[str, str]] = None,
        deadline: Optional[Deadline] = None,
    ) -> requests.Response:
        """Perform GET request.

        Args:
            uri: Absolute URL
            headers: Additional headers
            deadline: Deadline shared with the body read; a new one starts if omitted

        Returns:
            Response object with its body unread
        """
        return self.request("GET", uri, headers=headers, deadline=deadline)

    def post(
        self,
        uri: str,
        data: bytes,
        content_type: str,
        headers: Optional[Dict[str, str]] = None,
        deadline: Optional[Deadline] = None,
    ) -> requests.Response:
        """Perform POST request with a pre-encoded body.

        Args:
            uri: Absolute URL
            data: Encoded request body
            content_type: Value of the Content-Type header
            headers: Additional headers
            deadline: Deadline shared with the body read; a new one starts if omitted

        Returns:
            Response object with its body unread
        """
        merged = {"Content-Type": content_type}
        merged.update(headers or {})
        return self.request("POST", uri, data=data, headers=merged, deadline=deadline)

    def request(
        self,
        method: str,
        uri: str,
        data: Optional[bytes] = None,
        headers: Optional[Dict[str, str]] = None,
        deadline: Optional[Deadline] = None,
    ) -> requests.Response:
        """Prepare, route and send one request.

        Raises:
            ProxyResolutionError: If the proxy resolver raised; nothing was sent
            RequestTimeoutError: If the deadline passed
            TransportError: For any other failure to exchange the request
        """
        deadline = deadline or Deadline(self.timeout)

        try:
            prepared = self.session.prepare_request(
                requests.Request(method, uri, data=data, headers=headers)
            )
        except requests.RequestException as e:
            raise wrap_transport_error(uri, method, e) from e

        proxies = self._resolve_proxies(prepared, uri, method)
        settings = self.session.merge_environment_settings(prepared.url, proxies, True, None, None)

        self.logger.debug(
            f"{method} {prepared.url}",
            timeout=self.timeout,
            proxy=select_proxy(prepared.url, settings["proxies"]),
        )

        deadline.check(uri, method)
        remaining = deadline.remaining()
        timeout = None if remaining is None else max(remaining, 0.001)
        try:
            response = self.session.send(prepared, timeout=timeout, **settings)
        except requests.RequestException as e:
            raise wrap_transport_error(uri, method, e) from e

        self.logger.debug(f"Response: {response.status_code}", uri=uri)
        return response

    def iter_body(
        self,
        response: requests.Response,
        uri: str,
        method: str,
        deadline: Deadline,
        chunk_size: int = BODY_CHUNK_SIZE,
    ) -> Iterator[bytes]:
        """Yield the decoded body as it arrives, enforcing ``deadline`` between reads.

        Each read returns as soon as some data is available and waits at most
        the time left. The response is closed when the deadline passes.

        Raises:
            RequestTimeoutError: If the deadline passed before the body was complete
            TransportError: If the connection failed mid-body
        """
        while True:
            try:
                deadline.check(uri, method)
            except RequestTimeoutError:
                response.close()
                raise

            self._limit_read(response, deadline.remaining())
            try:
                chunk = response.raw.read1(chunk_size, decode_content=True)
            except Urllib3HTTPError as e:
                response.close()
                raise wrap_transport_error(uri, method, e) from e

            if not chunk:
                return
            yield chunk

    def read_body(self, response: requests.Response, uri: str, method: str, deadline: Deadline) -> bytes:
        """Read the whole body within ``deadline``."""
        body = b"".join(self.iter_body(response, uri, method, deadline))
        self.logger.debug(f"Read {len(body)} bytes", status_code=response.status_code)
        return body

    @staticmethod
    def _limit_read(response: requests.Response, remaining: Optional[float]) -> None:
        """Cap the next socket read at the time left."""
        if remaining is None:
            return
        sock = getattr(getattr(response.raw, "connection", None), "sock", None)
        if sock is not None:
            sock.settimeout(max(remaining, 0.001))

    def _resolve_proxies(self, prepared: requests.PreparedRequest, uri: str, method: str) -> Dict[str, str]:
        """Ask the resolver for this request's proxy.

        Without a resolver the mapping is left empty for the environment to
        fill in; with one, an empty mapping means a direct connection.
        """
        if self.proxy_resolver is None:
            return {}

        try:
            proxy_url = self.proxy_resolver.resolve(prepared)
        except Exception as e:
            raise ProxyResolutionError(uri, e, method) from e

        if not proxy_url:
            return {}
        return {urlparse(prepared.url).scheme: proxy_url}

    def close(self) -> None:
        """Close the HTTP session."""
        if self.session:
            self.session.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def build_client(config: Optional[ClientConfig] = None) -> HttpClient:
    """Build a client from ``config`` or from the current global snapshot."""
    return HttpClient(config or get_config())
