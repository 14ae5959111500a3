"""Shared Snyk report fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("SNYK_TO_SARIF_INPUT", "SNYK_TO_SARIF_OUTPUT", "SNYK_TO_SARIF_VERBOSE"):
        monkeypatch.delenv(name, raising=False)


def make_vuln(vuln_id: str = "SNYK-1", **overrides) -> dict:
    vuln = {
        "id": vuln_id,
        "title": "T",
        "packageName": "lodash",
        "severity": "high",
        "description": "d",
        "identifiers": {"CWE": ["CWE-400"]},
    }
    vuln.update(overrides)
    return vuln


def make_iac_issue(issue_id: str = "SNYK-CC-TF-1", **overrides) -> dict:
    issue = {
        "id": issue_id,
        "title": "S3 bucket is publicly readable",
        "severity": "medium",
        "lineNumber": 12,
        "isIgnored": False,
        "iacDescription": {
            "issue": "Bucket ACL allows public read",
            "impact": "Anyone can list objects",
            "resolve": "Set acl to private",
        },
    }
    issue.update(overrides)
    return issue


@pytest.fixture
def dependency_report() -> dict:
    return {"vulnerabilities": [make_vuln()], "displayTargetFile": "package.json"}


@pytest.fixture
def iac_report() -> dict:
    return {
        "targetFile": "main.tf",
        "infrastructureAsCodeIssues": [
            make_iac_issue(),
            make_iac_issue("SNYK-CC-TF-2", title="Ignored", isIgnored=True),
        ],
    }
