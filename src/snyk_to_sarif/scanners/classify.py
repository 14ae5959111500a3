"""Decide which Snyk report shape a project document has."""

from __future__ import annotations

from enum import Enum
from typing import Any

IAC_ISSUES_FIELD = "infrastructureAsCodeIssues"


class ReportShape(Enum):
    DEPENDENCY = "dependency"
    IAC        = "iac"


def classify(document: Any) -> ReportShape:
    # Only the IaC issue list is consulted; anything else is a dependency report
    if isinstance(document, dict) and document.get(IAC_ISSUES_FIELD) is not None:
        return ReportShape.IAC
    return ReportShape.DEPENDENCY
