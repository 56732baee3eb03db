"""Degeneracy warnings and the policy that decides how they surface."""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Iterable

from space_vectors.errors import DegeneracyError

KNOWN_CODES: frozenset[str] = frozenset({"W01", "W02"})


class DegeneracyWarning(UserWarning):
    """Warning with a machine-readable code."""

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        self.detail = message
        super().__init__(f"[{code}] {message}")


@dataclass(frozen=True)
class WarningPolicy:
    """Controls how individual warning codes are handled."""

    warn_as_error: frozenset[str] = frozenset()
    suppress: frozenset[str] = frozenset()


def emit_warning(code: str, message: str) -> None:
    """Issue a ``DegeneracyWarning``; evaluation always continues."""
    warnings.warn(DegeneracyWarning(code, message), stacklevel=3)


def apply_policy(
    recorded: Iterable[warnings.WarningMessage], policy: WarningPolicy | None = None
) -> list[str]:
    """Filter warnings recorded during one evaluation through *policy*.

    Returns the distinct messages to show, in order of first appearance.
    - Codes in ``policy.suppress`` are dropped.
    - A code in ``policy.warn_as_error`` raises ``DegeneracyError``.
    Warnings that are not ``DegeneracyWarning`` are ignored.
    """
    messages: list[str] = []
    for record in recorded:
        warning = record.message
        if not isinstance(warning, DegeneracyWarning):
            continue
        if policy is not None:
            if warning.code in policy.suppress:
                continue
            if warning.code in policy.warn_as_error:
                raise DegeneracyError(str(warning))
        text = str(warning)
        if text not in messages:
            messages.append(text)
    return messages


def parse_code_list(raw: str) -> frozenset[str]:
    """Parse a comma-separated string of W-codes and validate them.

    Raises ``ValueError`` for unknown codes.
    """
    codes: set[str] = set()
    for token in raw.split(","):
        token = token.strip()
        if not token:
            continue
        if token not in KNOWN_CODES:
            raise ValueError(f"Unknown warning code: {token!r} (known: {sorted(KNOWN_CODES)})")
        codes.add(token)
    return frozenset(codes)
