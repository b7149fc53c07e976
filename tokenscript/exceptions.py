from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from tokenscript.tokens import Token

if TYPE_CHECKING:
    from tokenscript.managers import Manager


class LanguageError(Exception):
    """Base class for errors raised while lexing, parsing or interpreting.

    The original *message* is kept as ``detail``; ``message`` and ``str()``
    carry the formatted text with the line and offending token when known.
    """

    def __init__(
        self,
        message: str,
        line: int | None = None,
        token: Token | None = None,
    ) -> None:
        self.detail = message
        self.line = line
        if token is not None and line is None and token.line is not None:
            self.line = token.line
        self.token = token
        self.message = self._format_message()
        super().__init__(self.message)

    def __reduce__(self) -> tuple[Any, ...]:
        """Rebuild from the constructor arguments, not the formatted message."""
        return (type(self), (self.detail, self.line, self.token), self.__dict__)

    def _format_message(self) -> str:
        base = self.detail
        if self.line is not None:
            base = f"Line {self.line}: {base}"
        if self.token is not None and self.token.value is not None:
            base += f"\nNear token: {self.token.value}"
        return base


class LexerError(LanguageError):
    pass


class ParserError(LanguageError):
    pass


class InterpreterError(LanguageError):
    """Raised during evaluation; manager errors also carry a taxonomy tag."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
        token: Token | None = None,
        manager: Manager | None = None,
        kind: StrEnum | None = None,
    ) -> None:
        super().__init__(message, line, token)
        self.manager = manager
        self.kind = kind

    def __reduce__(self) -> tuple[Any, ...]:
        return (
            type(self),
            (self.detail, self.line, self.token, self.manager, self.kind),
            self.__dict__,
        )


class ResolutionError(InterpreterError):
    """Raised when an identifier cannot be resolved within scope."""

    pass


ResolutionErrorType = Literal[
    "missing_reference",
    "circular_dependency",
    "interpretation_error",
    "syntax_error",
]


class TokenResolutionDetails(BaseModel):
    """Structured data about a design token that failed to resolve."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    token_name: str
    original_value: str
    error_type: ResolutionErrorType
    details: Optional[str] = None
    references: list[str] = Field(default_factory=list)


def _error_template(message: str) -> str:
    return f"TokenScript Error: {message}"


class TokenResolutionError(Exception):
    """Raised when a design token cannot be resolved to a value."""

    def __init__(
        self,
        *,
        token_name: str,
        original_value: str,
        error_type: ResolutionErrorType,
        details: str | None = None,
        references: list[str] | None = None,
    ) -> None:
        self.data = TokenResolutionDetails(
            token_name=token_name,
            original_value=original_value,
            error_type=error_type,
            details=details,
            references=references or [],
        )
        super().__init__(_error_template(self._describe(self.data)))

    def __reduce__(self) -> tuple[Any, ...]:
        return (_token_resolution_error_from_details, (self.data,))

    @staticmethod
    def _describe(data: TokenResolutionDetails) -> str:
        name = data.token_name
        match data.error_type:
            case "missing_reference":
                missing = ", ".join(data.references) or "unknown"
                return f"Token '{name}' references missing tokens: {missing}"
            case "circular_dependency":
                chain = " → ".join(data.references) or "unknown"
                return (
                    f"Token '{name}' has circular dependency in reference chain: {chain}"
                )
            case "interpretation_error":
                return f"Token '{name}' failed to interpret: {data.details or 'unknown error'}"
            case "syntax_error":
                return f"Token '{name}' has syntax error: {data.details or 'invalid syntax'}"
        return f"Token '{name}' could not be resolved"


def _token_resolution_error_from_details(
    data: TokenResolutionDetails,
) -> TokenResolutionError:
    return TokenResolutionError(**data.model_dump())


__all__ = [
    "InterpreterError",
    "LanguageError",
    "LexerError",
    "ParserError",
    "ResolutionError",
    "ResolutionErrorType",
    "TokenResolutionDetails",
    "TokenResolutionError",
]
