"""Manuscript registry and status reports."""

from .registry import ManuscriptRegistry, ManuscriptReport, ManuscriptSummary

__all__ = [
    "ManuscriptRegistry",
    "ManuscriptReport",
    "ManuscriptSummary",
]
