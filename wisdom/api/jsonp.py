"""Response Formatter — JSON and JSONP rendering of assembled entities.

Invariants:
    - Body is compact JSON of the payload, or "<callback>(<json>)" when requested
    - callback wins over jsonp when both are present and non-empty
    - Content-Type is always "application/json; charset=utf-8", JSONP included
    - An encoding failure raises InternalFailure("render_payload"), never a partial body
"""

import json
from typing import Sequence

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import Response
from pydantic import BaseModel

from wisdom.core.errors import ErrorCategory, InternalFailure

JSON_CONTENT_TYPE = "application/json; charset=utf-8"

Payload = BaseModel | Sequence[BaseModel]


def encode_payload(payload: Payload) -> str:
    return json.dumps(
        jsonable_encoder(payload),
        ensure_ascii=False,
        allow_nan=False,
        separators=(",", ":"),
    )


def jsonp_callback(request: Request) -> str | None:
    """Callback name from ?callback= or ?jsonp=, or None for plain JSON."""
    params = request.query_params
    return params.get("callback") or params.get("jsonp") or None


def render_payload(payload: Payload, request: Request) -> Response:
    try:
        body = encode_payload(payload)
    except (TypeError, ValueError) as e:
        raise InternalFailure(
            "render_payload", e, ErrorCategory.SERIALIZATION,
        ) from e
    callback = jsonp_callback(request)
    if callback:
        body = f"{callback}({body})"
    return Response(content=body, media_type=JSON_CONTENT_TYPE)


class WisdomJSONResponse(Response):
    """JSONResponse variant with the service's content type and compact encoding."""
    media_type = JSON_CONTENT_TYPE

    def render(self, content) -> bytes:
        return json.dumps(
            content, ensure_ascii=False, separators=(",", ":"),
        ).encode("utf-8")
