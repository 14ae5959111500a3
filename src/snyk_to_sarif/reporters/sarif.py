"""Convert Snyk project reports to a SARIF 2.1.0 document."""

from __future__ import annotations

from typing import Any

from snyk_to_sarif.models import ProjectFindings
from snyk_to_sarif.reporters.merge import merge_projects
from snyk_to_sarif.scanners.normalise_snyk import convert_project

SARIF_SCHEMA  = "https://raw.githubusercontent.com/oasis-tcs/sarif-spec/master/Schemata/sarif-schema-2.1.0.json"
SARIF_VERSION = "2.1.0"
DRIVER_NAME   = "Snyk"


def build_sarif(findings: ProjectFindings) -> dict[str, Any]:
    return {
        "$schema": SARIF_SCHEMA,
        "version": SARIF_VERSION,
        "runs": [{
            "tool": {
                "driver": {
                    "name": DRIVER_NAME,
                    "rules": [rule.to_sarif() for rule in findings.rules.values()],
                }
            },
            "results": [result.to_sarif() for result in findings.results],
        }],
    }


def convert(data: Any) -> dict[str, Any]:
    """Convert parsed Snyk JSON (one project report or a list of them) to SARIF.

    Reports are converted in input order. Rules sharing an id across reports
    are deduplicated, the last report's version winning; results are kept
    as-is. A malformed report raises ReportShapeError and nothing is built.
    """
    if isinstance(data, list):
        findings = merge_projects([convert_project(document) for document in data])
    else:
        findings = convert_project(data)
    return build_sarif(findings)
