"""Requests for remote resources and the interfaces around them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, NewType, Protocol, runtime_checkable

from remoteresolve.requestcontext import Context

ResolverName = NewType("ResolverName", str)
"""Name of a resolver that a request is submitted to."""


@runtime_checkable
class Request(Protocol):
    """A single request for a remote resource."""

    name: str
    namespace: str
    params: dict[str, str]


@runtime_checkable
class OwnedRequest(Protocol):
    """A request that also expresses an owner relationship."""

    def owner_ref(self) -> Any:
        """Return the owner reference to attach to the request."""
        ...


@runtime_checkable
class ResolvedResource(Protocol):
    """A read-only view of the data and metadata of a resolved resource."""

    def data(self) -> bytes:
        """Return the resolved content."""
        ...

    def annotations(self) -> dict[str, str] | None:
        """Return the annotations sent back with the content."""
        ...


@runtime_checkable
class Requester(Protocol):
    """Something that knows how to submit requests for remote resources."""

    def submit(
        self, ctx: Context, resolver: ResolverName, request: Request
    ) -> ResolvedResource:
        """Submit ``request`` to ``resolver`` and return the resolved resource."""
        ...


@dataclass(frozen=True)
class BasicRequest:
    """The fields needed to submit a new resource request."""

    name: str
    namespace: str
    params: dict[str, str] = field(default_factory=dict)


def new_request(name: str, namespace: str, params: dict[str, str]) -> BasicRequest:
    """Return a request with the given name, namespace and parameters."""
    return BasicRequest(name, namespace, params)