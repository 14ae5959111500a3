"""Normalise one Snyk project report → SARIF rules and results."""

from __future__ import annotations

from typing import Any

from snyk_to_sarif.errors import ReportShapeError
from snyk_to_sarif.models import ProjectFindings, Result, Rule
from snyk_to_sarif.scanners.classify import IAC_ISSUES_FIELD, ReportShape, classify

VULNERABILITIES_FIELD = "vulnerabilities"

SEVERITY_SARIF = {
    "high": "error",
}

# OWASP "Security Misconfiguration" category; IaC issues carry no CWE of their own
IAC_TAGS = ["security", "CWE-1032"]

IAC_HELP_TEMPLATE = (
    "## Overview\n{issue}\n\n"
    "## Impact\n\n{impact}\n\n"
    "## Remediation\n\n{resolve}"
)


def severity_level(severity: Any) -> str:
    return SEVERITY_SARIF.get(severity, "warning")


def _issue_list(document: dict, field_name: str) -> list:
    issues = document.get(field_name)
    if issues is None:
        raise ReportShapeError(
            f"no '{VULNERABILITIES_FIELD}' or '{IAC_ISSUES_FIELD}' list found"
        )
    if not isinstance(issues, list):
        raise ReportShapeError(
            f"'{field_name}' must be a list, got {type(issues).__name__}"
        )
    for issue in issues:
        if not isinstance(issue, dict):
            raise ReportShapeError(
                f"entries of '{field_name}' must be objects, got {type(issue).__name__}"
            )
    return issues


def _cwe_tags(identifiers: Any) -> list[str]:
    # The identifiers bag is optional; anything but an object carries no CWE
    if not isinstance(identifiers, dict):
        return []
    cwe = identifiers.get("CWE") or []
    if isinstance(cwe, str):
        return [cwe]
    if not isinstance(cwe, list):
        return []
    return [str(c) for c in cwe]


def _start_line(line_number: Any) -> int:
    # Snyk reports -1 when it cannot resolve a line; SARIF lines start at 1
    if isinstance(line_number, bool) or not isinstance(line_number, int):
        return 1
    return max(1, line_number)


def convert_dependencies(document: dict) -> ProjectFindings:
    findings      = ProjectFindings()
    affected_file = document.get("displayTargetFile", "")

    for vuln in _issue_list(document, VULNERABILITIES_FIELD):
        vuln_id  = vuln.get("id", "unknown")
        title    = vuln.get("title", "")
        package  = vuln.get("packageName", "")
        severity = vuln.get("severity", "")

        tags = _cwe_tags(vuln.get("identifiers"))
        tags.append("security")

        findings.rules[vuln_id] = Rule(
            id=vuln_id,
            short_description=f"{title} - {package}",
            full_description=f"The dependency {package} introduces a {title} vulnerability",
            help_markdown=vuln.get("description", ""),
            level=severity_level(severity),
            tags=tags,
        )
        findings.results.append(Result(
            rule_id=vuln_id,
            message=(
                f"This adds a vulnerable dependency {package} "
                f"which introduces a {severity} severity security flaw"
            ),
            uri=affected_file,
        ))

    return findings


def convert_iac(document: dict) -> ProjectFindings:
    findings      = ProjectFindings()
    affected_file = document.get("targetFile", "")

    for issue in _issue_list(document, IAC_ISSUES_FIELD):
        if issue.get("isIgnored"):
            continue

        issue_id    = issue.get("id", "unknown")
        title       = issue.get("title", "")
        description = issue.get("iacDescription") or {}
        if not isinstance(description, dict):
            raise ReportShapeError(
                f"'iacDescription' of issue {issue_id} must be an object, "
                f"got {type(description).__name__}"
            )

        findings.rules[issue_id] = Rule(
            id=issue_id,
            short_description=title,
            full_description=description.get("issue", ""),
            help_markdown=IAC_HELP_TEMPLATE.format(
                issue=description.get("issue", ""),
                impact=description.get("impact", ""),
                resolve=description.get("resolve", ""),
            ),
            level=severity_level(issue.get("severity")),
            tags=list(IAC_TAGS),
        )
        findings.results.append(Result(
            rule_id=issue_id,
            message=title,
            uri=affected_file,
            start_line=_start_line(issue.get("lineNumber")),
        ))

    return findings


CONVERTERS = {
    ReportShape.DEPENDENCY: convert_dependencies,
    ReportShape.IAC:        convert_iac,
}


def convert_project(document: Any, shape: ReportShape | None = None) -> ProjectFindings:
    """Convert one Snyk project report into its rules and results.

    Raises ReportShapeError when the document is not an object, or when it
    lacks the issue list its shape needs. A report with neither list is
    classified as a dependency report and fails here.
    """
    if not isinstance(document, dict):
        raise ReportShapeError(
            f"project report must be a JSON object, got {type(document).__name__}"
        )
    if shape is None:
        shape = classify(document)
    return CONVERTERS[shape](document)
