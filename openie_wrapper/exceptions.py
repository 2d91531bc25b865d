"""
Custom exceptions for the openie-wrapper library.
"""


class OpenIEError(Exception):
    """Base exception for all library errors."""
    pass


class EngineNotFoundError(OpenIEError):
    """Raised when the engine installation or the Java binary cannot be located."""
    pass


class EngineError(OpenIEError):
    """Raised when the extraction engine exits with a non-zero status."""

    def __init__(self, returncode: int, stderr: str = ""):
        self.returncode = returncode
        self.stderr = stderr
        message = f"Extraction engine exited with status {returncode}"
        if stderr:
            message += f":\n{stderr}"
        super().__init__(message)


class OutputParseError(OpenIEError, ValueError):
    """Raised when a line of engine output is not in ollie format."""

    def __init__(self, message: str, line: str = "", line_number=None):
        self.line = line
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(f"{message}: {line!r}")


class GraphRenderError(OpenIEError):
    """Raised when the graph-layout tool is missing or fails."""
    pass


class ConfigurationError(OpenIEError):
    """Raised when configuration is invalid."""
    pass


class ValidationError(OpenIEError):
    """Raised when a configuration file cannot be read as a mapping."""
    pass
