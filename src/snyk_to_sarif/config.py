"""Configuration: input/output locations and verbosity."""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass

TRUTHY = {"1", "true", "yes"}


@dataclass(frozen=True)
class Settings:
    input_path: str | None   # None → read piped stdin
    output_path: str | None  # None → write to stdout
    verbose: bool = False


def load_settings(args: argparse.Namespace) -> Settings:
    """Build settings from parsed flags, falling back to SNYK_TO_SARIF_* env vars.

    Explicit flags always win over the environment.
    """
    env_verbose = os.environ.get("SNYK_TO_SARIF_VERBOSE", "").strip().lower() in TRUTHY
    return Settings(
        input_path=args.input or os.environ.get("SNYK_TO_SARIF_INPUT") or None,
        output_path=args.output or os.environ.get("SNYK_TO_SARIF_OUTPUT") or None,
        verbose=bool(args.verbose) or env_verbose,
    )
