"""Criminal-record service adapters."""

from .http import HttpCriminalRecordChecker

__all__ = ["HttpCriminalRecordChecker"]
