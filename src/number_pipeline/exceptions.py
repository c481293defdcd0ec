from typing import Optional


class NumberPipelineError(Exception):
    """Base class for errors reported to the user by the command line tools."""

    kind = "error"


class FilterParseError(NumberPipelineError):
    """A filter token could not be turned into a filter."""

    def __init__(self, message: str, token: str):
        super().__init__(message)
        self.token = token


class UnknownFilterError(FilterParseError):
    kind = "unknown_filter"

    def __init__(self, token: str):
        super().__init__(f"Unknown filter: {token}", token)


class InvalidFilterArgumentError(FilterParseError):
    kind = "invalid_filter_argument"

    def __init__(self, token: str):
        super().__init__(f"Invalid filter argument: {token}", token)


class UnknownSinkError(NumberPipelineError):
    kind = "unknown_sink"

    def __init__(self, value: str):
        super().__init__(f"Unknown sink type: {value}")
        self.value = value


class NumberSourceError(NumberPipelineError):
    """The number source could not be opened or decoded."""

    kind = "source_unreadable"

    def __init__(self, path: str, original_error: Optional[Exception] = None):
        message = f"Cannot open file {path}"
        if original_error:
            message += f" ({type(original_error).__name__}: {original_error})"
        super().__init__(message)
        self.path = path
        self.original_error = original_error


class ProcessorStateError(NumberPipelineError):
    kind = "processor_state"
