"""
Explicit request-body decoding.

``decode_body`` never raises: it returns a ``DecodeResult`` holding the
decoded model plus every problem it hit.  Fields that could not be decoded
keep their zero-value defaults.  ``DecodeResult.unwrap`` applies the policy:

* lenient -- return the value, problems are only logged
* strict  -- raise ``RequestValidationError`` if there was any problem
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from pydantic import BaseModel, ValidationError

from nearby.domain.errors import RequestValidationError

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


@dataclass
class DecodeResult(Generic[M]):
    value: M
    problems: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.problems

    def unwrap(self, strict: bool) -> M:
        if self.problems:
            if strict:
                raise RequestValidationError(self.problems)
            logger.info(
                "Lenient decode of %s ignored: %s",
                type(self.value).__name__,
                "; ".join(self.problems),
            )
        return self.value


def decode_body(model: type[M], raw: bytes) -> DecodeResult[M]:
    if not raw.strip():
        return DecodeResult(model(), ["empty body"])

    try:
        data = json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        return DecodeResult(model(), [f"malformed JSON: {exc}"])

    if not isinstance(data, dict):
        return DecodeResult(model(), ["body is not a JSON object"])

    try:
        return DecodeResult(model.model_validate(data))
    except ValidationError as exc:
        problems = [_describe(err) for err in exc.errors()]
        bad_keys = {err["loc"][0] for err in exc.errors() if err["loc"]}

    cleaned = {k: v for k, v in data.items() if k not in bad_keys}
    try:
        value = model.model_validate(cleaned)
    except ValidationError:
        value = model()
    return DecodeResult(value, problems)


def _describe(err: dict) -> str:
    where = ".".join(str(part) for part in err["loc"]) or "body"
    return f"{where}: {err['msg']}"
