"""Exceptions raised while converting Snyk output."""

from __future__ import annotations


class SnykToSarifError(Exception):
    """Base class for conversion failures."""


class InvalidInputError(SnykToSarifError):
    """Raised when no input is available or it cannot be parsed as JSON."""


class ReportShapeError(SnykToSarifError):
    """Raised when a project report lacks the issue list its shape requires."""
