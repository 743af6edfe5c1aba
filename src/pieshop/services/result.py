"""The value every service method returns.

Commands never see exceptions from the service layer for expected
outcomes (unknown pie, already initialized, failed migration); those come
back as ``ok=False`` results carrying a machine-readable error code.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service operation.

    ``op`` names the operation (``"add_item"``, ``"total"``...) and selects
    the renderer. ``data`` is the payload on success, ``error`` is set on
    failure, ``warnings`` collects plugin problems that did not stop the
    operation, and ``meta`` holds the ``--verbose`` span tree.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        """An ``ok=False`` result; keyword arguments become ``error.detail``."""
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))
