"""Shared type aliases for riskrating."""

from .common import Axis, JsonObject, JsonScalar, JsonValue

__all__ = [
    "Axis",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
]
