"""ServiceResult and ServiceError: the payload emitted at the CLI boundary.

Services raise classified errors; commands convert the outcome of each call
into a ServiceResult so every command renders the same way.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from tenantctl.domain.errors import ClassifiedError, error_kind, error_message


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult.

    ``code`` is the error kind (``"not found"``, ``"invalid"``, ...).
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: BaseException) -> ServiceError:
        detail: dict[str, Any] = {}
        if isinstance(exc, ClassifiedError) and exc.op:
            detail["op"] = exc.op
        return cls(code=str(error_kind(exc)), message=error_message(exc), detail=detail)


class ServiceResult(BaseModel):
    """Uniform result of one command.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"create_organization"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(cls, op: str, exc: BaseException) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError.from_exception(exc))
