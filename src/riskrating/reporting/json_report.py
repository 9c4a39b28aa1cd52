"""JSON payload for a classification result."""

from __future__ import annotations

import json

from riskrating.model import ClassificationResult, Vector
from riskrating.parsers.vector import serialize_vector
from riskrating.types import JsonObject


def build_payload(
    result: ClassificationResult,
    *,
    vector: Vector | None = None,
    share_url: str | None = None,
) -> JsonObject:
    """Result fields plus, when given, the vector and its share URL."""
    payload: JsonObject = result.to_dict()
    if vector is not None:
        payload["vector"] = serialize_vector(vector)
        payload["factors"] = dict(vector.as_dict())
    if share_url is not None:
        payload["url"] = share_url
    return payload


def render_json(payload: JsonObject) -> str:
    return json.dumps(payload, indent=2, sort_keys=True)
