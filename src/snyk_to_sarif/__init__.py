"""Convert Snyk JSON scan output to SARIF 2.1.0."""

from __future__ import annotations

from snyk_to_sarif.reporters.sarif import build_sarif, convert

__version__ = "1.0.0"

__all__ = ["build_sarif", "convert", "__version__"]
