"""Errors that cross the roast pipeline boundary.

Each carries the HTTP status it maps to; main.py renders them as
``{"error": detail}``.
"""


class RoastError(Exception):
    status_code: int = 500

    def __init__(self, detail: str, status_code: int | None = None) -> None:
        super().__init__(detail)
        self.detail = detail
        if status_code is not None:
            self.status_code = status_code


class InvalidRequestError(RoastError):
    status_code = 400


class UnsupportedFormatError(InvalidRequestError):
    def __init__(self, detail: str = "Unsupported file format") -> None:
        super().__init__(detail)


class DocumentParseError(InvalidRequestError):
    def __init__(self, detail: str = "Could not read the uploaded document") -> None:
        super().__init__(detail)


class UpstreamError(RoastError):
    """Completion provider failed; the detail is a generic user-facing message."""

    status_code = 500


class ConfigurationError(RoastError):
    """Fatal at startup, never rendered to a caller."""
