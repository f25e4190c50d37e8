"""
Process-wide client configuration.

The store holds an immutable ClientConfig snapshot. Setters swap in a new
snapshot under a lock; the client factory reads one snapshot per call, so a
request never sees a configuration change halfway through.
"""

import threading
from dataclasses import dataclass, replace
from datetime import timedelta
from numbers import Real
from typing import Optional, Union

from ...constants import DEFAULT_TIMEOUT_SECONDS
from ..proxy import ProxyLike, ProxyResolver, as_proxy_resolver

TimeoutLike = Union[float, int, timedelta, None]


@dataclass(frozen=True)
class ClientConfig:
    """Snapshot of the settings every client is built from.

    Attributes:
        timeout: Seconds before a request is abandoned, None for no timeout
        proxy_resolver: Resolver consulted for every request, None for direct connections
    """

    timeout: Optional[float] = DEFAULT_TIMEOUT_SECONDS
    proxy_resolver: Optional[ProxyResolver] = None


def normalize_timeout(timeout: TimeoutLike) -> Optional[float]:
    """Convert a timeout to seconds; zero, negative and None all mean no timeout."""
    if timeout is None:
        return None
    if isinstance(timeout, timedelta):
        seconds = timeout.total_seconds()
    elif isinstance(timeout, Real) and not isinstance(timeout, bool):
        seconds = float(timeout)
    else:
        raise TypeError(f"timeout must be seconds or a timedelta, got {type(timeout).__name__}")
    return seconds if seconds > 0 else None


class ConfigStore:
    """Thread-safe holder of the current ClientConfig."""

    def __init__(self, initial: Optional[ClientConfig] = None):
        self._lock = threading.RLock()
        self._config = initial or ClientConfig()

    def snapshot(self) -> ClientConfig:
        with self._lock:
            return self._config

    def set_timeout(self, timeout: TimeoutLike) -> None:
        seconds = normalize_timeout(timeout)
        with self._lock:
            self._config = replace(self._config, timeout=seconds)

    def set_proxy(self, resolver: ProxyLike) -> None:
        proxy_resolver = as_proxy_resolver(resolver)
        with self._lock:
            self._config = replace(self._config, proxy_resolver=proxy_resolver)

    def reset(self) -> None:
        with self._lock:
            self._config = ClientConfig()


# Global configuration store
config_store = ConfigStore()


def set_timeout(timeout: TimeoutLike) -> None:
    """Set the timeout used by every client built from now on.

    Args:
        timeout: Seconds (int or float) or a timedelta. Zero, negative
            values and None disable the timeout.
    """
    config_store.set_timeout(timeout)


def set_proxy(resolver: ProxyLike) -> None:
    """Set the proxy resolver used by every client built from now on.

    Args:
        resolver: A ProxyResolver, a ``(request) -> url`` function, a proxy
            URL, or None for direct connections.
    """
    config_store.set_proxy(resolver)


def get_config() -> ClientConfig:
    """Return the current configuration snapshot."""
    return config_store.snapshot()


def reset_config() -> None:
    """Restore the default timeout and remove any proxy resolver."""
    config_store.reset()
