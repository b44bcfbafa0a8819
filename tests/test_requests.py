import dataclasses

import pytest

from remoteresolve.requestcontext import Context
from remoteresolve.requests import (
    BasicRequest,
    OwnedRequest,
    Request,
    Requester,
    ResolvedResource,
    ResolverName,
    new_request,
)


class _StaticResource:
    def __init__(self, content):
        self._content = content

    def data(self):
        return self._content

    def annotations(self):
        return {"content-type": "text/plain"}


class _EchoRequester:
    def submit(self, ctx, resolver, request):
        return _StaticResource(f"{resolver}:{request.namespace}/{request.name}".encode())


def test_new_request_holds_given_fields():
    params = {"url": "x", "revision": "main"}
    req = new_request("rr", "foo", params)
    assert req.name == "rr"
    assert req.namespace == "foo"
    assert req.params == {"url": "x", "revision": "main"}


def test_new_request_keeps_the_same_params_mapping():
    params = {"k": "v"}
    req = new_request("rr", "foo", params)
    assert req.params is params


def test_basic_request_is_immutable():
    req = new_request("rr", "foo", {})
    with pytest.raises(dataclasses.FrozenInstanceError):
        req.name = "other"
    assert req.name == "rr"


def test_basic_requests_with_same_fields_are_equal():
    assert new_request("rr", "foo", {"a": "1"}) == BasicRequest("rr", "foo", {"a": "1"})
    assert new_request("rr", "foo", {"a": "1"}) != BasicRequest("rr", "bar", {"a": "1"})


def test_basic_request_satisfies_request_but_not_owned_request():
    req = new_request("rr", "foo", {"k": "v"})
    assert isinstance(req, Request)
    assert not isinstance(req, OwnedRequest)
    assert (req.name, req.namespace, req.params) == ("rr", "foo", {"k": "v"})


def test_requester_protocol_submits_and_returns_resource():
    requester = _EchoRequester()
    assert isinstance(requester, Requester)
    resource = requester.submit(Context(), ResolverName("git"), new_request("rr", "foo", {}))
    assert isinstance(resource, ResolvedResource)
    assert resource.data() == b"git:foo/rr"
    assert resource.annotations() == {"content-type": "text/plain"}