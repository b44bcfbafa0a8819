"""Deterministic, reproducible names for resource requests."""

from __future__ import annotations

from typing import Mapping

_FNV128_OFFSET_BASIS = 0x6C62272E07BB014262B821756295C58D
_FNV128_PRIME = 0x0000000001000000000000000000013B
_MASK128 = (1 << 128) - 1


class _Fnv128a:
    """Incremental 128-bit FNV-1a hash."""

    __slots__ = ("_state",)

    def __init__(self) -> None:
        self._state = _FNV128_OFFSET_BASIS

    def update(self, data: bytes) -> None:
        state = self._state
        for byte in data:
            state ^= byte
            state = (state * _FNV128_PRIME) & _MASK128
        self._state = state

    def digest(self) -> bytes:
        return self._state.to_bytes(16, "big")


def fnv128a(data: bytes) -> bytes:
    """Return the 16-byte big-endian FNV-1a 128-bit hash of ``data``."""
    hasher = _Fnv128a()
    hasher.update(data)
    return hasher.digest()


def generate_deterministic_name(prefix: str, base: str, params: Mapping[str, str]) -> str:
    """Return a unique but reproducible name of the form ``{prefix}-{hash}``.

    The hash covers ``base`` followed by every parameter key and value,
    taken in sorted key order, so the result does not depend on the
    order in which ``params`` was built.
    """
    hasher = _Fnv128a()
    hasher.update(base.encode("utf-8"))
    for key in sorted(params or {}):
        hasher.update(key.encode("utf-8"))
        hasher.update(params[key].encode("utf-8"))
    return f"{prefix}-{hasher.digest().hex()}"