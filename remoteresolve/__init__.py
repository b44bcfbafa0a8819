"""Shared primitives, request types and resolver helpers for remote resource resolution."""

__version__ = "0.1.0"