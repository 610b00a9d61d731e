from __future__ import annotations


class DataPointError(RuntimeError):
    """Base class for every failure raised by the DataPoint client."""


class ConfigurationError(DataPointError):
    """Raised when a client cannot be built from the options provided."""


class TransportError(DataPointError):
    """Raised when a request cannot be sent or its body cannot be read."""

    def __init__(self, message: str, *, description: str, url: str) -> None:
        super().__init__(message)
        self.description = description
        self.url = url


class DecodeError(DataPointError):
    """Raised when a response body does not match the expected wire schema."""

    def __init__(self, message: str, *, description: str, url: str) -> None:
        super().__init__(message)
        self.description = description
        self.url = url


class ConversionError(DataPointError):
    """Raised when a decoded field cannot be turned into its domain value."""

    def __init__(self, field: str, value: str, reason: str | None = None) -> None:
        message = f"failed to parse {field} {value!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.field = field
        self.value = value


class UnknownParameterError(ConversionError):
    def __init__(self, code: str) -> None:
        super().__init__("parameter", code, "could not find descriptor for parameter")
        self.code = code
