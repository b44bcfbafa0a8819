"""Resolver interfaces, a configurable fake resolver and shared checks."""

from __future__ import annotations

import json
import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Protocol, runtime_checkable

from remoteresolve.common import LABEL_KEY_RESOLVER_TYPE
from remoteresolve.requestcontext import Context

# Value of the resolver type label on requests meant for the fake resolver.
LABEL_VALUE_FAKE_RESOLVER_TYPE = "fake"

# Name the fake resolver is associated with.
FAKE_RESOLVER_NAME = "Fake"

# Name of the fake resolver's single parameter.
FAKE_PARAM_NAME = "fake-key"


@runtime_checkable
class ResolvedResource(Protocol):
    """The data and annotations of a successful resource fetch."""

    def data(self) -> bytes:
        """Return the resolved content."""
        ...

    def annotations(self) -> dict[str, str] | None:
        """Return the annotations to include with the content."""
        ...


@runtime_checkable
class Resolver(Protocol):
    """Type-specific resolution of resources from one kind of remote location."""

    def initialize(self, ctx: Context) -> None:
        """Set up whatever the resolver needs before it starts."""
        ...

    def get_name(self, ctx: Context) -> str:
        """Return the resolver's name, e.g. "Git"."""
        ...

    def get_selector(self, ctx: Context) -> dict[str, str] | None:
        """Return the labels directing requests to this resolver."""
        ...

    def validate_params(self, ctx: Context, params: Mapping[str, str] | None) -> None:
        """Raise if any request parameter is missing or invalid."""
        ...

    def resolve(self, ctx: Context, params: Mapping[str, str]) -> ResolvedResource:
        """Fetch the resource described by ``params``."""
        ...


@runtime_checkable
class ConfigWatcher(Protocol):
    """A resolver that accepts additional configuration from an administrator."""

    def get_config_name(self, ctx: Context) -> str:
        """Return the name of the resolver's configuration."""
        ...


@runtime_checkable
class TimedResolution(Protocol):
    """A resolver that overrides the default resolution timeout."""

    def get_resolution_timeout(self, ctx: Context, default_timeout: timedelta) -> timedelta:
        """Return the maximum duration of a single request to this resolver."""
        ...


class MissingTypeSelectorError(ValueError):
    """A resolver's selector does not include the resolver type label."""

    def __init__(self) -> None:
        super().__init__(
            "invalid resolver: minimum selector must include "
            f"{json.dumps(LABEL_KEY_RESOLVER_TYPE)}"
        )


@dataclass
class FakeResolvedResource:
    """A resource served by :class:`FakeResolver`.

    If ``error_with`` is set, resolution fails with that message; otherwise
    the resolver waits ``wait_for`` before returning this resource.
    """

    content: str = ""
    annotation_map: dict[str, str] | None = None
    error_with: str = ""
    wait_for: timedelta = field(default_factory=timedelta)

    def data(self) -> bytes:
        """Return the content as bytes."""
        return self.content.encode("utf-8")

    def annotations(self) -> dict[str, str] | None:
        """Return the annotation map."""
        return self.annotation_map


@dataclass
class FakeResolver:
    """A resolver serving preconfigured resources keyed by its parameter value."""

    for_param: dict[str, FakeResolvedResource] | None = None
    timeout: timedelta = field(default_factory=timedelta)

    def initialize(self, ctx: Context) -> None:
        """Make sure the resource table exists."""
        if self.for_param is None:
            self.for_param = {}

    def get_name(self, ctx: Context) -> str:
        """Return the fake resolver's name."""
        return FAKE_RESOLVER_NAME

    def get_selector(self, ctx: Context) -> dict[str, str]:
        """Return the labels requests need for the fake resolver to handle them."""
        return {LABEL_KEY_RESOLVER_TYPE: LABEL_VALUE_FAKE_RESOLVER_TYPE}

    def validate_params(self, ctx: Context, params: Mapping[str, str] | None) -> None:
        """Raise ValueError if a required parameter is missing or empty."""
        required = [FAKE_PARAM_NAME]
        if params is None:
            missing = required
        else:
            missing = [name for name in required if not params.get(name)]
        if missing:
            raise ValueError(f"missing {', '.join(missing)}")

    def resolve(self, ctx: Context, params: Mapping[str, str]) -> FakeResolvedResource:
        """Return the resource configured for the parameter value."""
        param_value = params.get(FAKE_PARAM_NAME, "")
        resource = (self.for_param or {}).get(param_value)
        if resource is None:
            raise LookupError(f"couldn't find resource for param value {param_value}")
        if resource.error_with:
            raise RuntimeError(resource.error_with)
        if resource.wait_for.total_seconds() > 0:
            time.sleep(resource.wait_for.total_seconds())
        return resource

    def get_resolution_timeout(self, ctx: Context, default_timeout: timedelta) -> timedelta:
        """Return the configured timeout, or ``default_timeout`` if none is set."""
        if self.timeout > timedelta(0):
            return self.timeout
        return default_timeout


def validate_resolver(ctx: Context, resolver: Resolver) -> None:
    """Raise MissingTypeSelectorError unless the selector names a resolver type."""
    selector = resolver.get_selector(ctx)
    if not selector or not selector.get(LABEL_KEY_RESOLVER_TYPE):
        raise MissingTypeSelectorError()


def labels_match_selector(
    labels: Mapping[str, str] | None, selector: Mapping[str, str] | None
) -> bool:
    """Return whether a request with ``labels`` is selected by ``selector``.

    A request without any labels is never selected.
    """
    if not labels:
        return False
    return all(
        key in labels and labels[key] == value for key, value in (selector or {}).items()
    )


def sanitize_resolver_name(name: str) -> str:
    """Strip slashes and spaces from a resolver name."""
    return name.replace("/", "").replace(" ", "")