import random

import pytest

from remoteresolve.names import MAX_NAME_LENGTH, SimpleNameGenerator

_ALPHABET = set("bcdfghjklmnpqrstvwxz2456789")


@pytest.mark.parametrize(
    "base, prefix",
    [("hello", "hello"), ("a" * 100, "a" * 57)],
)
def test_restrict_length_with_random_suffix(base, prefix):
    gen = SimpleNameGenerator(random.Random(1))
    got = gen.restrict_length_with_random_suffix(base)
    assert got.startswith(prefix + "-")
    suffix = got[len(prefix) + 1:]
    assert len(suffix) == 5
    assert set(suffix) <= _ALPHABET
    assert len(got) <= MAX_NAME_LENGTH


def test_random_suffix_is_reproducible_with_seed():
    first = SimpleNameGenerator(random.Random(42)).restrict_length_with_random_suffix("x")
    second = SimpleNameGenerator(random.Random(42)).restrict_length_with_random_suffix("x")
    assert first == second


@pytest.mark.parametrize(
    "base, want",
    [
        ("hello", "hello"),
        ("a" * 100, "a" * MAX_NAME_LENGTH),
        ("abcdefg   !@#!$", "abcdefg"),
    ],
)
def test_restrict_length(base, want):
    assert SimpleNameGenerator().restrict_length(base) == want


def test_restrict_length_trims_after_truncation():
    base = "a" * 62 + "-" + "b" * 10
    assert SimpleNameGenerator().restrict_length(base) == "a" * 62


def test_restrict_length_without_alphanumerics_raises():
    with pytest.raises(ValueError):
        SimpleNameGenerator().restrict_length("!!!")