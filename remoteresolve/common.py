"""Constants, errors and helpers shared by resolvers and their clients.

This module is kept free of any cluster- or framework-specific types so
that it stays focused on primitives needed regardless of how a resolver
or client is implemented.
"""

from __future__ import annotations

import json

# Annotation key passed back with a resolved resource's content type.
ANNOTATION_KEY_CONTENT_TYPE = "content-type"

# Label that determines which resolver ultimately receives a request.
LABEL_KEY_RESOLVER_TYPE = "resolution.tekton.dev/type"

# Message reported while no resolver has answered a request yet.
MESSAGE_WAITING_FOR_RESOLVER = "waiting for resolver"

# Processing reasons.
REASON_RESOLUTION_IN_PROGRESS = "ResolutionInProgress"

# Happy reasons.
REASON_RESOLUTION_SUCCESSFUL = "ResolutionSuccessful"

# Unhappy reasons.
REASON_RESOLUTION_FAILED = "ResolutionFailed"
REASON_RESOLUTION_TIMED_OUT = "ResolutionTimedOut"


def _quote(value: str) -> str:
    """Return a double-quoted, escaped representation of ``value``."""
    return json.dumps(value, ensure_ascii=False)


class ResolutionError(Exception):
    """An error carrying a short machine-readable reason with the original error."""

    def __init__(self, reason: str, original: BaseException) -> None:
        super().__init__(str(original))
        self.reason = reason
        self.original = original
        self.__cause__ = original

    def __str__(self) -> str:
        return str(self.original)


# Sentinel raised while a resource request is still being worked on.
ERROR_REQUEST_IN_PROGRESS = ResolutionError(
    "RequestInProgress", Exception("Resource request is still in-progress")
)


class InvalidResourceKeyError(Exception):
    """A key did not match the expected "name" or "namespace/name" format."""

    def __init__(self, key: str, original: BaseException) -> None:
        super().__init__(key, original)
        self.key = key
        self.original = original
        self.__cause__ = original

    def __str__(self) -> str:
        return f"invalid resource key {_quote(self.key)}: {self.original}"


class InvalidRequestError(Exception):
    """A resource request is badly formed, e.g. its parameters are wrong."""

    def __init__(self, resolution_request_key: str, message: str) -> None:
        super().__init__(resolution_request_key, message)
        self.resolution_request_key = resolution_request_key
        self.message = message

    def __str__(self) -> str:
        return (
            f"invalid resource request {_quote(self.resolution_request_key)}: "
            f"{self.message}"
        )


class GettingResourceError(Exception):
    """An error raised during what should have been a successful request."""

    def __init__(self, resolver_name: str, key: str, original: BaseException) -> None:
        super().__init__(resolver_name, key, original)
        self.resolver_name = resolver_name
        self.key = key
        self.original = original
        self.__cause__ = original

    def __str__(self) -> str:
        return (
            f"error getting {_quote(self.resolver_name)} {_quote(self.key)}: "
            f"{self.original}"
        )


class UpdatingRequestError(Exception):
    """An error while updating a resolution request, e.g. patching its data."""

    def __init__(self, resolution_request_key: str, original: BaseException) -> None:
        super().__init__(resolution_request_key, original)
        self.resolution_request_key = resolution_request_key
        self.original = original
        self.__cause__ = original

    def __str__(self) -> str:
        return (
            "error updating resource request "
            f"{_quote(self.resolution_request_key)} with data: {self.original}"
        )


def reason_error(err: BaseException) -> tuple[str, BaseException]:
    """Return the reason and underlying error of ``err``.

    Errors that are not a :class:`ResolutionError` get the generic
    failure reason and are returned unchanged.
    """
    if isinstance(err, ResolutionError):
        return err.reason, err.original
    return REASON_RESOLUTION_FAILED, err