"""Typed error model with stable, machine-readable error codes."""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import ClassVar


class ErrorCode(StrEnum):
    """Stable error identifiers used across the rendering pipeline."""

    VALIDATION = "E_VALIDATION"
    ASSET = "E_ASSET"
    SERIALIZATION = "E_SERIALIZATION"
    MANIFEST = "E_MANIFEST"


class PerfTuneError(Exception):
    """Render failure with a stable code, an optional hint, and string context.

    Subclasses pin their code through ``error_code``.
    """

    error_code: ClassVar[ErrorCode]

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        context: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code: str = self.error_code.value
        self.hint = hint
        self.context: dict[str, str] = dict(context or {})

    def __str__(self) -> str:
        lines = [self.message]
        if self.hint:
            lines.append(f"Hint: {self.hint}")
        lines.extend(f"  {key}: {value}" for key, value in self.context.items() if value)
        return "\n".join(lines)

    def to_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {
            "code": self.code,
            "message": str(self),
            "context": dict(self.context),
        }
        if self.hint is not None:
            payload["hint"] = self.hint
        return payload


class ValidationError(PerfTuneError):
    error_code = ErrorCode.VALIDATION


class AssetError(PerfTuneError):
    error_code = ErrorCode.ASSET


class SerializationError(PerfTuneError):
    error_code = ErrorCode.SERIALIZATION


class ManifestError(PerfTuneError):
    error_code = ErrorCode.MANIFEST


__all__ = [
    "AssetError",
    "ErrorCode",
    "ManifestError",
    "PerfTuneError",
    "SerializationError",
    "ValidationError",
]
