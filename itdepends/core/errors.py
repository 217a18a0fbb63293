"""Error types raised by the itdepends pipeline.

Every error is fatal: the run stops at the first one and no report is
written. ``stage`` names the pipeline step that failed and is what the CLI
shows to the user.
"""


class ItDependsError(Exception):
    """Base class for pipeline failures."""
    stage = 'analyze dependencies'

    def __init__(self, message: str, *, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause

    def describe(self) -> str:
        return f"Failed to {self.stage}: {self}"


class InputError(ItDependsError):
    """Input file could not be read."""
    stage = 'open input file'


class ParseError(ItDependsError):
    """Input document is malformed or incomplete."""
    stage = 'parse dependency tree'


class NetworkError(ItDependsError):
    """Transport failure or non-success status from the registry."""
    stage = 'call registry API'


class ResponseFormatError(NetworkError):
    """Registry response body does not match the expected envelope."""
    stage = 'decode registry response'


class OutputError(ItDependsError):
    """Report could not be written."""
    stage = 'write report'
