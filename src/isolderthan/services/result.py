"""ServiceResult and ServiceError: the result contract of the service layer.

INVARIANT: Service operations return ServiceResult, never raise for
expected failures. Exit codes are derived from ``error.code`` only at
the process boundary.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from isolderthan.domain.errors import IsOlderThanError
from isolderthan.domain.types import describe_error


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: IsOlderThanError) -> ServiceError:
        """Payload for a domain failure; ``detail`` gains its error category."""
        return cls(
            code=str(exc.code),
            message=exc.message,
            detail={"category": describe_error(exc.code), **exc.detail},
        )


class ServiceResult(BaseModel):
    """Return type for service operations.

    Attributes:
        ok: Whether the operation succeeded. A "not older" verdict is
            still a success; the verdict lives in ``data``.
        op: Name of the operation (e.g. ``"is_older_than"``).
        data: Operation-specific payload on success.
        warnings: Verdict caveats, such as a modification time later
            than the clock. They never change the exit code.
        error: Structured error if ``ok`` is False.
        meta: Reference mode, anchor and threshold summary.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
