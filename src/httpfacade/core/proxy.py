"""
Proxy resolution for outgoing requests.

A resolver is asked, per prepared request, which proxy URL to route it
through. Returning ``None`` means a direct connection; raising aborts the
request before anything is sent.
"""

from typing import Callable, Optional, Protocol, Union, runtime_checkable

import requests
from requests.utils import get_environ_proxies, select_proxy


@runtime_checkable
class ProxyResolver(Protocol):
    """Decides which proxy, if any, a request goes through."""

    def resolve(self, request: requests.PreparedRequest) -> Optional[str]:
        ...


ProxyFunction = Callable[[requests.PreparedRequest], Optional[str]]
ProxyLike = Union[ProxyResolver, ProxyFunction, str, None]


class StaticProxyResolver:
    """Routes every request through one proxy URL."""

    def __init__(self, proxy_url: str):
        if not proxy_url:
            raise ValueError("proxy_url must not be empty")
        self.proxy_url = proxy_url

    def resolve(self, request: requests.PreparedRequest) -> Optional[str]:
        return self.proxy_url

    def __repr__(self) -> str:
        return f"StaticProxyResolver({self.proxy_url!r})"


class FunctionProxyResolver:
    """Adapts a plain ``(request) -> url`` function to the resolver interface."""

    def __init__(self, func: ProxyFunction):
        self.func = func

    def resolve(self, request: requests.PreparedRequest) -> Optional[str]:
        return self.func(request)

    def __repr__(self) -> str:
        return f"FunctionProxyResolver({getattr(self.func, '__name__', self.func)!r})"


class EnvironmentProxyResolver:
    """Resolves proxies from HTTP_PROXY, HTTPS_PROXY, ALL_PROXY and NO_PROXY."""

    def resolve(self, request: requests.PreparedRequest) -> Optional[str]:
        proxies = get_environ_proxies(request.url)
        return select_proxy(request.url, proxies)

    def __repr__(self) -> str:
        return "EnvironmentProxyResolver()"


def as_proxy_resolver(value: ProxyLike) -> Optional[ProxyResolver]:
    """Coerce a resolver, a function or a proxy URL into a ProxyResolver."""
    if value is None:
        return None
    if isinstance(value, ProxyResolver):
        return value
    if isinstance(value, str):
        return StaticProxyResolver(value)
    if callable(value):
        return FunctionProxyResolver(value)
    raise TypeError(f"Cannot use {type(value).__name__} as a proxy resolver")
