# SPDX-FileCopyrightText: 2025 shamir-recover contributors
# SPDX-License-Identifier: MIT

"""Runtime tunables for share parsing, logging and auditing.

Values come from environment variables so that batch jobs can adjust limits
without code changes. Malformed values fall back to the defaults.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional


def _load_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _load_level(name: str, default: str) -> str:
    value = os.environ.get(name)
    if value is None:
        return default
    level = value.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        return default
    return level


@dataclass(frozen=True)
class RecoveryPolicy:
    """Holds runtime limits shared by the codec, the CLI and the audit trail."""

    max_digits: int = 100_000
    log_level: str = "WARNING"
    audit_dir: Optional[str] = None


def load_policy() -> RecoveryPolicy:
    """Load the recovery policy considering environment overrides."""

    return RecoveryPolicy(
        max_digits=_load_int("SHAMIR_RECOVER_MAX_DIGITS", 100_000),
        log_level=_load_level("SHAMIR_RECOVER_LOG_LEVEL", "WARNING"),
        audit_dir=os.environ.get("SHAMIR_RECOVER_AUDIT_DIR") or None,
    )


policy = load_policy()


__all__ = ["RecoveryPolicy", "policy", "load_policy"]
