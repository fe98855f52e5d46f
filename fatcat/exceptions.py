"""
Custom exception hierarchy for fatcat.

The scanning core never raises for per-entry filesystem problems; these
exceptions are for the layers that talk to the operator.
"""


class FatcatError(Exception):
    """Base exception for all fatcat errors."""
    pass


class ScanRootError(FatcatError):
    """Raised when the scan target does not exist or cannot be read."""
    pass


class ReportWriteError(FatcatError):
    """Raised when the report log file cannot be written."""
    pass
