"""Per-resolver configuration kept up to date and handed out through a context."""

from __future__ import annotations

import threading
from collections.abc import Mapping
from typing import Any

from remoteresolve.requestcontext import Context


class _ResolverConfigKey:
    __slots__ = ()

    def __repr__(self) -> str:
        return "<resolver config>"


_RESOLVER_CONFIG_KEY = _ResolverConfigKey()


def data_from_config_map(config: Any) -> dict[str, str]:
    """Return a copy of a config map's data, or an empty dict if it has none.

    ``config`` may be None, a mapping of the data itself, or an object
    with a ``data`` attribute holding such a mapping (or None).
    """
    if config is None:
        return {}
    data = config if isinstance(config, Mapping) else getattr(config, "data", None)
    if data is None:
        return {}
    return dict(data)


class ConfigStore:
    """Holds the latest configuration of one resolver.

    Updates for any other config name than the resolver's own are ignored.
    """

    def __init__(self, resolver_config_name: str) -> None:
        if not resolver_config_name:
            raise ValueError("resolver returned empty config name")
        self.resolver_config_name = resolver_config_name
        self._lock = threading.Lock()
        self._config: dict[str, str] | None = None

    def update(self, name: str, data: Any) -> None:
        """Store new configuration ``data`` published under ``name``."""
        if name != self.resolver_config_name:
            return
        converted = data_from_config_map(data)
        with self._lock:
            self._config = converted

    def get_resolver_config(self) -> dict[str, str]:
        """Return a copy of the current configuration, or an empty dict."""
        with self._lock:
            current = self._config
        return dict(current) if current is not None else {}

    def to_context(self, ctx: Context) -> Context:
        """Return a context carrying the resolver's current configuration."""
        return inject_resolver_config_to_context(ctx, self.get_resolver_config())


def inject_resolver_config_to_context(ctx: Context, conf: Mapping[str, str]) -> Context:
    """Return a new context holding ``conf`` as the resolver's configuration."""
    return ctx.with_value(_RESOLVER_CONFIG_KEY, conf)


def get_resolver_config_from_context(ctx: Context) -> Mapping[str, str]:
    """Return the resolver configuration stored in ``ctx``, or an empty dict."""
    stored = ctx.value(_RESOLVER_CONFIG_KEY)
    if isinstance(stored, Mapping):
        return stored
    return {}