# SPDX-License-Identifier: AGPL-3.0-only
"""Naming-convention matchers for ARIA attribute names.

Matchers are evaluated in a fixed order and the first result that is not
``UNMATCHED`` decides the fate of a name.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .known_attributes import KnownAttributeSet


# XML attribute-name characters (NameStartChar / NameChar).
ATTRIBUTE_NAME_START_CHAR = (
    ":A-Z_a-z"
    "\u00C0-\u00D6\u00D8-\u00F6\u00F8-\u02FF\u0370-\u037D\u037F-\u1FFF"
    "\u200C-\u200D\u2070-\u218F\u2C00-\u2FEF\u3001-\uD7FF\uF900-\uFDCF\uFDF0-\uFFFD"
)
ATTRIBUTE_NAME_CHAR = ATTRIBUTE_NAME_START_CHAR + "\\-.0-9\u00B7\u0300-\u036F\u203F-\u2040"

ARIA_CAMEL_PATTERN = re.compile(r"aria[A-Z][" + ATTRIBUTE_NAME_CHAR + r"]*")
ARIA_HYPHEN_PATTERN = re.compile(r"aria-[" + ATTRIBUTE_NAME_CHAR + r"]*")

INVALID_CAMEL_TEMPLATE = (
    "Invalid ARIA attribute `%s`. ARIA attributes follow the pattern aria-* and must be lowercase."
)
INVALID_CAMEL_SUGGESTION_TEMPLATE = "Invalid ARIA attribute `%s`. Did you mean `%s`?"
UNKNOWN_CASE_SUGGESTION_TEMPLATE = "Unknown ARIA attribute `%s`. Did you mean `%s`?"


class MatchOutcome(Enum):
    UNMATCHED = "unmatched"
    VALID = "valid"
    INVALID = "invalid"
    SUGGESTION = "suggestion"
    DEFERRED = "deferred"


@dataclass(frozen=True)
class MatchResult:
    outcome: MatchOutcome
    name: str
    template: str | None = None
    args: tuple[Any, ...] = ()

    @property
    def handled(self) -> bool:
        return self.outcome is not MatchOutcome.UNMATCHED

    @property
    def needs_warning(self) -> bool:
        return self.outcome in {MatchOutcome.INVALID, MatchOutcome.SUGGESTION}


def _unmatched(name: str) -> MatchResult:
    return MatchResult(MatchOutcome.UNMATCHED, name)


class CamelCaseMatcher:
    """``ariaHidden`` style names; never acceptable in markup."""

    prefix = "aria"

    def match(self, name: str, known: KnownAttributeSet) -> MatchResult:
        if not ARIA_CAMEL_PATTERN.fullmatch(name):
            return _unmatched(name)
        canonical = "aria-" + name[len(self.prefix):].lower()
        if canonical not in known:
            return MatchResult(MatchOutcome.INVALID, name, INVALID_CAMEL_TEMPLATE, (name,))
        if canonical != name:
            return MatchResult(
                MatchOutcome.SUGGESTION,
                name,
                INVALID_CAMEL_SUGGESTION_TEMPLATE,
                (name, canonical),
            )
        return _unmatched(name)


class HyphenatedMatcher:
    """``aria-hidden`` style names, checked against the vocabulary."""

    def match(self, name: str, known: KnownAttributeSet) -> MatchResult:
        if not ARIA_HYPHEN_PATTERN.fullmatch(name):
            return _unmatched(name)
        lowered = name.lower()
        if lowered not in known:
            return MatchResult(MatchOutcome.DEFERRED, name)
        if lowered != name:
            return MatchResult(
                MatchOutcome.SUGGESTION,
                name,
                UNKNOWN_CASE_SUGGESTION_TEMPLATE,
                (name, lowered),
            )
        return MatchResult(MatchOutcome.VALID, name)


DEFAULT_MATCHERS = (CamelCaseMatcher(), HyphenatedMatcher())


def match_name(name: str, known: KnownAttributeSet, matchers=DEFAULT_MATCHERS) -> MatchResult:
    for matcher in matchers:
        result = matcher.match(name, known)
        if result.handled:
            return result
    return _unmatched(name)


__all__ = [
    "ARIA_CAMEL_PATTERN",
    "ARIA_HYPHEN_PATTERN",
    "ATTRIBUTE_NAME_CHAR",
    "CamelCaseMatcher",
    "DEFAULT_MATCHERS",
    "HyphenatedMatcher",
    "INVALID_CAMEL_SUGGESTION_TEMPLATE",
    "INVALID_CAMEL_TEMPLATE",
    "MatchOutcome",
    "MatchResult",
    "UNKNOWN_CASE_SUGGESTION_TEMPLATE",
    "match_name",
]
