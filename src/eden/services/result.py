"""ServiceResult and ServiceError: the caller-facing service contract.

INVARIANT: All public service methods return ServiceResult. Business
failures never raise past the service boundary; they come back as
``ok=False`` with a stable ``error.code``.

Error codes and the ``detail`` each one carries:

    VALIDATION_FAILED    ``{"violations": [{"field", "message"}, ...]}``
                         sorted by field; kind mismatches, unknown patch
                         keys and constraint failures.
    CONFLICT             ``{"field": ...}``, the first unique field taken.
    NOT_FOUND            ``{"field": ...}``, the parameter or reference
                         that named a missing record.
    NO_RECOGNIZED_FIELD  empty; a patch with no allow-listed key.
    NO_PARAMETER         empty; a lookup given no parameter at all.
    UNAUTHORIZED         empty; bad credentials or an invalid or expired token.
    INTERNAL_ERROR       empty; database, signing or data-integrity failure.
                         The message is always the same opaque text and the
                         cause is only logged.

A successful result may still carry ``warnings``: best-effort steps that
failed without undoing the operation (graph-service notification after
registration) or no-op requests (a favorite or cart product added twice).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

ERROR_CODES = frozenset(
    {
        "VALIDATION_FAILED",
        "CONFLICT",
        "NOT_FOUND",
        "NO_RECOGNIZED_FIELD",
        "NO_PARAMETER",
        "UNAUTHORIZED",
        "INTERNAL_ERROR",
    }
)


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult.

    ``code`` is one of ``ERROR_CODES``; ``detail`` shape depends on it.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Universal return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"register_user"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (timing).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
