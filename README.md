# remoteresolve

Building blocks for asking for a remote resource and for writing resolvers
that answer such requests. The package has no dependencies outside the
standard library.

## What it provides

- `remoteresolve.common`
  - Constants: `ANNOTATION_KEY_CONTENT_TYPE`, `LABEL_KEY_RESOLVER_TYPE`,
    `MESSAGE_WAITING_FOR_RESOLVER` and the reasons
    `REASON_RESOLUTION_IN_PROGRESS`, `REASON_RESOLUTION_SUCCESSFUL`,
    `REASON_RESOLUTION_FAILED` and `REASON_RESOLUTION_TIMED_OUT`.
  - Errors: `ResolutionError` carries a reason with the original error, and
    its message is the original's. `ERROR_REQUEST_IN_PROGRESS` is a ready-made
    instance with the reason `RequestInProgress`. The other errors are
    `InvalidResourceKeyError`, `InvalidRequestError`, `GettingResourceError`
    and `UpdatingRequestError`.
  - `reason_error(err)` returns `(reason, original)` for a `ResolutionError`.
    For any other exception it returns `(REASON_RESOLUTION_FAILED, err)`.
- `remoteresolve.requestcontext`
  - `Context` is an immutable bag of request-scoped values, with
    `with_value` and `value`.
  - `inject_request_namespace` sets the request's namespace once. A later
    call returns the context unchanged.
  - `request_namespace` reads the namespace back, or returns `""` if none
    was set.
- `remoteresolve.names`
  - `SimpleNameGenerator` keeps names to at most 63 characters.
  - `restrict_length_with_random_suffix` cuts the base to 57 characters and
    appends `-` and five random characters.
  - `restrict_length` cuts to 63 characters, then trims the end until it
    finishes on an ASCII letter or digit. It raises `ValueError` if nothing
    is left.
  - Pass a seeded `random.Random` to the constructor to get reproducible
    suffixes. `SIMPLE_NAME_GENERATOR` is a shared instance.
- `remoteresolve.naming`
  - `generate_deterministic_name(prefix, base, params)` returns
    `{prefix}-{hash}`. The hash is the hex FNV-1a 128-bit hash (`fnv128a`)
    of the base, then each parameter key and value in sorted key order.
- `remoteresolve.requests`
  - The `Request`, `OwnedRequest`, `ResolvedResource` and `Requester`
    protocols, and the `ResolverName` type.
  - The frozen dataclass `BasicRequest`, and `new_request` to build one.
- `remoteresolve.framework.configstore`
  - `ConfigStore` keeps the latest configuration published under one
    resolver's config name. `update` ignores any other name.
    `get_resolver_config` returns a copy of the configuration, and
    `to_context` returns a context that carries it.
  - `data_from_config_map` copies config data from a mapping, an object
    with a `data` attribute, or `None`.
  - `inject_resolver_config_to_context` stores a configuration in a
    context, and `get_resolver_config_from_context` reads it back.
- `remoteresolve.framework.resolvers`
  - The `Resolver`, `ConfigWatcher`, `TimedResolution` and
    `ResolvedResource` protocols.
  - `validate_resolver` raises `MissingTypeSelectorError` when a resolver's
    selector lacks the resolver type label.
  - `labels_match_selector` reports whether a request's labels match a
    selector. Unlabelled requests never match.
  - `sanitize_resolver_name` strips slashes and spaces from a name.
  - `FakeResolver` and `FakeResolvedResource` are a configurable resolver
    for tests. A resource can fail with a given message (`error_with`) or
    be returned after a delay (`wait_for`), and the resolver can have its
    own `timeout`.

## Example

```python
from remoteresolve.naming import generate_deterministic_name
from remoteresolve.requests import new_request
from remoteresolve.requestcontext import Context, inject_request_namespace
from remoteresolve.framework.resolvers import FakeResolver, FakeResolvedResource

params = {"fake-key": "bar"}
name = generate_deterministic_name("fake", "foo/pipeline", params)
request = new_request(name, "foo", params)

resolver = FakeResolver(for_param={"bar": FakeResolvedResource(content="some content")})
ctx = inject_request_namespace(Context(), request.namespace)
resolver.initialize(ctx)
resolver.validate_params(ctx, request.params)
resource = resolver.resolve(ctx, request.params)
print(resource.data())  # b"some content"
```

## What it does not do

This package is a library of primitives only. It does not include:

- a controller or reconciler that watches stored requests, calls resolvers,
  enforces timeouts or writes results back;
- a concrete `Requester` that submits requests anywhere;
- storage for requests;
- a command-line program.

Those pieces are left to the code that uses these building blocks.

## Running the tests

```
pip install -e .[test]
pytest
```