from __future__ import annotations

from enum import Enum


class ErrorCodeBase(str, Enum):
    """Base class for error codes.

    This is a string enum where each member is both an Enum and a str.
    """

    value: str


class DecodeErrorCode(ErrorCodeBase):
    """Precise decode failure codes (no generics)."""

    MISSING_KEY = "MISSING_KEY"  # required key absent (or null)
    TYPE_MISMATCH = "TYPE_MISMATCH"  # key present, value of the wrong JSON type
    EXPECTED_OBJECT = "EXPECTED_OBJECT"  # payload top level is not an object
    EXPECTED_ARRAY = "EXPECTED_ARRAY"  # payload top level is not an array of objects


class DecodeError(ValueError):
    """Raised when a JSON object cannot be decoded into a typed value.

    Attributes:
        code: Machine-readable error code
        key: Offending key for field-level errors, None for payload-level errors
        message: Human-readable error message

    Example:
        >>> raise DecodeError.missing_key("id")
    """

    def __init__(self, code: DecodeErrorCode, message: str, *, key: str | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.key = key
        self.message = message

    @classmethod
    def missing_key(cls, key: str) -> DecodeError:
        return cls(DecodeErrorCode.MISSING_KEY, f"Missing required key '{key}'", key=key)

    @classmethod
    def type_mismatch(cls, key: str, detail: str) -> DecodeError:
        return cls(
            DecodeErrorCode.TYPE_MISMATCH,
            f"Value type mismatch for key '{key}': {detail}",
            key=key,
        )

    @classmethod
    def expected_object(cls, actual: str) -> DecodeError:
        return cls(DecodeErrorCode.EXPECTED_OBJECT, f"Expected JSON object, got {actual}")

    @classmethod
    def expected_array(cls, actual: str) -> DecodeError:
        return cls(DecodeErrorCode.EXPECTED_ARRAY, f"Expected JSON array of objects, got {actual}")

    def __repr__(self) -> str:
        return f"DecodeError(code={code_value(self.code)!r}, key={self.key!r})"


def code_value(code: ErrorCodeBase) -> str:
    """Return the string value for an error code without the Enum repr.

    Gives "MISSING_KEY", not "DecodeErrorCode.MISSING_KEY".
    """
    return code.value


def error_body(error: DecodeError) -> dict[str, str | None]:
    """Standard error payload for decode failures."""
    return {"code": code_value(error.code), "message": error.message, "key": error.key}


__all__ = [
    "DecodeError",
    "DecodeErrorCode",
    "ErrorCodeBase",
    "code_value",
    "error_body",
]
