from enum import Enum


class MajinError(Exception):
    """Base exception for all Majin errors.

    The message is automatically prefixed with the subsystem name in square brackets.
    The unprefixed text stays available as ``message`` for user-facing output.
    """

    subsystem = "core"

    def __init__(self, message: str, *, subsystem: str | None = None) -> None:
        self.subsystem = subsystem or self.subsystem
        self.message = message
        super().__init__(f"[{self.subsystem}] {message}")


class ErrorKind(str, Enum):
    """Classified outcome of a failed generation."""

    INVALID_REQUEST = "InvalidRequest"
    NOT_FOUND = "NotFound"
    MISSING_CREDENTIAL = "MissingCredential"
    UNSUPPORTED_PROVIDER = "UnsupportedProvider"
    PROVIDER_ERROR = "ProviderError"
    EMPTY_COMPLETION = "EmptyCompletion"

    @property
    def http_status(self) -> int:
        return _HTTP_STATUS[self]


_HTTP_STATUS = {
    ErrorKind.INVALID_REQUEST: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.MISSING_CREDENTIAL: 500,
    ErrorKind.UNSUPPORTED_PROVIDER: 501,
    ErrorKind.PROVIDER_ERROR: 500,
    ErrorKind.EMPTY_COMPLETION: 500,
}


# ─── Subsystem-level exceptions ───────────────────────────────────────────────


class ConfigError(MajinError):
    """Raised for configuration loading or parsing errors."""

    subsystem = "config"


class RegistryError(MajinError):
    """Raised for model registry and result store failures."""

    subsystem = "registry"


class GenerationError(MajinError):
    """Raised when a prompt cannot be turned into a completion.

    Every subclass carries an ``ErrorKind`` so callers can map it to a
    response without inspecting the exception type.
    """

    subsystem = "generation"
    kind: ErrorKind = ErrorKind.PROVIDER_ERROR

    @property
    def http_status(self) -> int:
        return self.kind.http_status


class StateError(MajinError):
    """Raised for invalid application state changes or persistence failures."""

    subsystem = "state"


class CLIError(MajinError):
    """Raised for CLI-specific logic or user input issues."""

    subsystem = "cli"
