"""Immutable request-scoped context and the request namespace stored in it."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Hashable, Mapping


class Context:
    """An immutable bag of request-scoped values.

    Deriving a context with :meth:`with_value` leaves the original
    untouched, so values set on a parent stay visible to its children.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[Hashable, Any] | None = None) -> None:
        self._values = MappingProxyType(dict(values or {}))

    def with_value(self, key: Hashable, value: Any) -> Context:
        """Return a new context holding ``value`` under ``key``."""
        return Context({**self._values, key: value})

    def value(self, key: Hashable) -> Any:
        """Return the value stored under ``key``, or None."""
        return self._values.get(key)


class _RequestNamespaceKey:
    __slots__ = ()

    def __repr__(self) -> str:
        return "<request namespace>"


_REQUEST_NAMESPACE_KEY = _RequestNamespaceKey()


def inject_request_namespace(ctx: Context, namespace: str) -> Context:
    """Return a context carrying the request's namespace.

    The namespace can be set only once: if ``ctx`` already carries one,
    ``ctx`` is returned unchanged.
    """
    if ctx.value(_REQUEST_NAMESPACE_KEY) is not None:
        return ctx
    return ctx.with_value(_REQUEST_NAMESPACE_KEY, namespace)


def request_namespace(ctx: Context) -> str:
    """Return the namespace of the current request, or an empty string."""
    val = ctx.value(_REQUEST_NAMESPACE_KEY)
    return val if isinstance(val, str) else ""