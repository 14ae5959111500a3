"""Count SARIF results by level."""

from __future__ import annotations

from typing import Any

LEVELS = ["error", "warning"]


def count_levels(sarif: dict[str, Any]) -> dict[str, int]:
    counts = {level: 0 for level in LEVELS}
    rule_count = 0

    for run in sarif.get("runs", []):
        rules = run.get("tool", {}).get("driver", {}).get("rules", [])
        rule_count += len(rules)
        levels = {
            r["id"]: r.get("defaultConfiguration", {}).get("level", "warning")
            for r in rules
        }
        for result in run.get("results", []):
            level = result.get("level") or levels.get(result.get("ruleId"), "warning")
            counts[level] = counts.get(level, 0) + 1

    return {
        "total": sum(counts.values()),
        **counts,
        "rules": rule_count,
    }
