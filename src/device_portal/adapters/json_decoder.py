"""Best-effort JSON decoding of device responses.

A missing body, a JSON `null` and a body that does not validate against the
model all resolve to the model's empty value. Only the `FetchResult.status`
tells them apart.
"""

from __future__ import annotations

import logging

from pydantic import ValidationError

from device_portal.core.domain.results import FetchResult, ModelT

logger = logging.getLogger(__name__)

_LOG_BODY_CHARS = 200


def _truncate(text: str, max_chars: int = _LOG_BODY_CHARS) -> str:
    if len(text) <= max_chars:
        return text
    return text[:max_chars] + "..."


def decode_model(body: str | None, model: type[ModelT], *, path: str = "") -> FetchResult[ModelT]:
    """Decode `body` into `model` without raising."""

    if body is None or not body.strip() or body.strip() == "null":
        return FetchResult.empty(model)

    try:
        value = model.model_validate_json(body)
    except ValidationError as exc:
        logger.warning(
            "Could not decode %s response from %s (%d errors): %s",
            model.__name__,
            path or "<unknown>",
            exc.error_count(),
            _truncate(body),
        )
        return FetchResult.decode_error(model, str(exc))

    return FetchResult.success(value)
