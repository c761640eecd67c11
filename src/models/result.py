"""Three-state load result handed to callers instead of mutable UI state."""

from __future__ import annotations

from enum import Enum
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

from utils.error_handling import AppError, FailureReason

DataT = TypeVar("DataT")


class LoadState(str, Enum):
    PENDING = "pending"
    FAILED = "failed"
    READY = "ready"


class LoadResult(BaseModel, Generic[DataT]):
    """Pending, Failed(reason) or Ready(data)."""

    state: LoadState
    reason: Optional[FailureReason] = None
    message: Optional[str] = None
    data: Optional[DataT] = None

    @classmethod
    def pending(cls) -> "LoadResult[DataT]":
        return cls(state=LoadState.PENDING)

    @classmethod
    def failed(cls, reason: FailureReason, message: str) -> "LoadResult[DataT]":
        return cls(state=LoadState.FAILED, reason=reason, message=message)

    @classmethod
    def from_error(cls, error: AppError) -> "LoadResult[DataT]":
        return cls.failed(error.reason, str(error))

    @classmethod
    def ready(cls, data: DataT) -> "LoadResult[DataT]":
        return cls(state=LoadState.READY, data=data)

    @property
    def is_ready(self) -> bool:
        return self.state == LoadState.READY
