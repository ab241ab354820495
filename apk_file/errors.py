"""Errors raised along the search pipeline."""


class ApkFileError(Exception):
    """Base class for fatal errors. The CLI reports these and exits non-zero."""


class ValidationError(ApkFileError):
    """A value outside its fixed set of allowed values."""

    def __init__(self, field: str, value: str, allowed):
        self.field = field
        self.value = value
        self.allowed = list(allowed)
        super().__init__(f"{value!r} is not a valid {field}, allowed: {', '.join(self.allowed)}")


class InputError(ApkFileError):
    """No query was given, neither as an argument nor on stdin."""


class FetchError(ApkFileError):
    """The contents index could not be reached or answered with an error."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"requesting {url} failed: {reason}")


class ParseError(ApkFileError):
    """The response body could not be read as an HTML document."""


class UnsupportedFormatError(ApkFileError):
    """An output format outside the supported set."""

    def __init__(self, fmt: str, valid):
        self.format = fmt
        self.valid = list(valid)
        super().__init__(f"{fmt!r} is not a supported output format, allowed: {', '.join(self.valid)}")


class ExtractionWarning(UserWarning):
    """A result row with missing or extra cells. Never fatal."""

    def __init__(self, row: int, message: str, column: int | None = None, value: str | None = None):
        self.row = row
        self.column = column
        self.value = value
        self.message = message
        super().__init__(message)
