"""Merge per-project findings into one rule set and result list."""

from __future__ import annotations

from typing import Iterable

from snyk_to_sarif.models import ProjectFindings, Rule


def merge_rules(merged: dict[str, Rule], rules: dict[str, Rule]) -> dict[str, Rule]:
    """Insert or overwrite each rule by id; later rules replace earlier ones."""
    for rule_id, rule in rules.items():
        merged[rule_id] = rule
    return merged


def merge_projects(projects: Iterable[ProjectFindings]) -> ProjectFindings:
    master = ProjectFindings()
    for project in projects:
        merge_rules(master.rules, project.rules)
        master.results.extend(project.results)
    return master
