"""
Errors that stop a scan.

Per-file problems (a file that cannot be opened or read) are not errors
here: the scan service records them as unreadable and moves on.
"""


class SigcheckError(Exception):
    """Base class for every fatal sigcheck error."""


class ConfigError(SigcheckError):
    """Raised before any file is scanned when the inputs are unusable."""


class SignatureSourceError(ConfigError):
    pass


class SignatureParseError(ConfigError):

    def __init__(self, line_number: int, line: str, reason: str) -> None:
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(
            f"Failed to parse signature line {line_number} ({line!r}): {reason}"
        )


class ScanRootError(ConfigError):
    pass


class ReportWriteError(SigcheckError):
    pass
