"""Tests for SARIF level counts."""

from __future__ import annotations

from conftest import make_vuln
from snyk_to_sarif import convert
from snyk_to_sarif.reporters.count import count_levels


def test_counts_resolve_level_through_rule():
    report = {
        "displayTargetFile": "package.json",
        "vulnerabilities": [make_vuln("A"), make_vuln("A"), make_vuln("B", severity="medium")],
    }
    counts = count_levels(convert(report))
    assert counts == {"total": 3, "error": 2, "warning": 1, "rules": 2}


def test_counts_empty_document():
    assert count_levels({}) == {"total": 0, "error": 0, "warning": 0, "rules": 0}
