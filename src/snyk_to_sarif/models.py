"""Data models: Rule, Result and per-project findings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Rule:
    id: str
    short_description: str
    full_description: str
    help_markdown: str
    level: str  # "error" | "warning"
    tags: list[str] = field(default_factory=list)

    def to_sarif(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "shortDescription":     {"text": self.short_description},
            "fullDescription":      {"text": self.full_description},
            "help":                 {"markdown": self.help_markdown, "text": ""},
            "defaultConfiguration": {"level": self.level},
            "properties":           {"tags": list(self.tags)},
        }


@dataclass
class Result:
    rule_id: str
    message: str
    uri: str
    start_line: int | None = None  # IaC findings only

    def to_sarif(self) -> dict[str, Any]:
        physical: dict[str, Any] = {"artifactLocation": {"uri": self.uri}}
        if self.start_line is not None:
            physical["region"] = {"startLine": self.start_line, "startColumn": 1}
        return {
            "ruleId": self.rule_id,
            "message": {"text": self.message},
            "locations": [{"physicalLocation": physical}],
        }


@dataclass
class ProjectFindings:
    """Rules keyed by id (insertion ordered) and results in issue order."""

    rules: dict[str, Rule] = field(default_factory=dict)
    results: list[Result] = field(default_factory=list)
