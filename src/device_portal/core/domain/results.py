"""Outcome of a fetch-and-decode call.

The typed getters on `DeviceApiClient` collapse `EMPTY` and `DECODE_ERROR`
into the model's empty value. `FetchResult` keeps the distinction for callers
that need to tell "device sent nothing" from "device sent garbage".
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from device_portal.core.domain.models import DeviceModel

ModelT = TypeVar("ModelT", bound=DeviceModel)


class FetchStatus(str, Enum):
    OK = "ok"
    EMPTY = "empty"
    DECODE_ERROR = "decode_error"


@dataclass(frozen=True)
class FetchResult(Generic[ModelT]):
    status: FetchStatus
    value: ModelT
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is FetchStatus.OK

    @classmethod
    def success(cls, value: ModelT) -> "FetchResult[ModelT]":
        return cls(status=FetchStatus.OK, value=value)

    @classmethod
    def empty(cls, model: type[ModelT]) -> "FetchResult[ModelT]":
        return cls(status=FetchStatus.EMPTY, value=model.empty())

    @classmethod
    def decode_error(cls, model: type[ModelT], error: str) -> "FetchResult[ModelT]":
        return cls(status=FetchStatus.DECODE_ERROR, value=model.empty(), error=error)
