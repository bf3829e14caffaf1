"""ServiceResult and ServiceError: the return type of every service operation.

Renderers dispatch on ``op`` and read ``data``; the JSON formatter
serializes the whole model. Nothing below the service layer builds one.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why an operation failed: a stable ``code`` plus a human message."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of a service operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Operation name; selects the renderer (``"path_matrix"``, ``"has_path"``...).
        data: JSON-ready payload. Labels are already stringified.
        warnings: Non-fatal notes, printed to stderr by the CLI.
        error: Set only when ``ok`` is False.
        meta: Telemetry span tree in verbose mode, otherwise None.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def success(
        cls, op: str, data: dict[str, Any], *, warnings: list[str] | None = None
    ) -> ServiceResult:
        return cls(ok=True, op=op, data=data, warnings=warnings or [])

    @classmethod
    def failure(
        cls, op: str, code: str, message: str, *, detail: dict[str, Any] | None = None
    ) -> ServiceResult:
        error = ServiceError(code=code, message=message, detail=detail or {})
        return cls(ok=False, op=op, error=error)
