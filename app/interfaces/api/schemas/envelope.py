"""Response envelope shared by every endpoint."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel

DataT = TypeVar("DataT")


class ApiResponse(BaseModel, Generic[DataT]):
    success: bool = True
    data: DataT | None = None
    message: str | None = None


def ok(data: DataT | None = None, message: str | None = None) -> ApiResponse[DataT]:
    return ApiResponse(success=True, data=data, message=message)


__all__ = ["ApiResponse", "ok"]
