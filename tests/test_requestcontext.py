from remoteresolve.requestcontext import (
    Context,
    inject_request_namespace,
    request_namespace,
)


def test_request_namespace():
    namespace_a = "foo"
    namespace_b = "bar"

    ctx = inject_request_namespace(Context(), namespace_a)
    assert request_namespace(ctx) == namespace_a

    ctx = inject_request_namespace(ctx, namespace_b)
    assert request_namespace(ctx) == namespace_a

    assert request_namespace(Context()) == ""


def test_injection_does_not_mutate_parent():
    parent = Context()
    child = inject_request_namespace(parent, "foo")
    assert request_namespace(parent) == ""
    assert request_namespace(child) == "foo"


def test_context_with_value_and_value():
    ctx = Context().with_value("a", 1)
    derived = ctx.with_value("b", 2)
    assert ctx.value("b") is None
    assert derived.value("a") == 1
    assert derived.value("b") == 2


def test_namespace_survives_other_values():
    ctx = inject_request_namespace(Context(), "ns").with_value("other", "x")
    assert request_namespace(ctx) == "ns"