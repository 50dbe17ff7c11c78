# modreports/errors.py
"""
Report subsystem errors.

Callers map ReportNotFound to a 404, InvalidPagination to a 400 and
StoreUnavailable to a 500. Nothing here knows about HTTP.
"""


class ReportError(Exception):
    """Base class for every error raised by this package."""


class ReportNotFound(ReportError, LookupError):
    def __init__(self, report_id):
        super().__init__(f"Post report {report_id} not found")
        self.report_id = report_id


class InvalidPagination(ReportError, ValueError):
    pass


class StoreUnavailable(ReportError):
    """The relational store could not be reached or dropped the connection."""
