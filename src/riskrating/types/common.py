"""Cross-module type aliases."""

from __future__ import annotations

from typing import Literal, TypeAlias

Axis: TypeAlias = Literal["likelihood", "impact"]

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
JsonObject: TypeAlias = dict[str, JsonValue]
