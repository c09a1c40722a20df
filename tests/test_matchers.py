from __future__ import annotations

import pytest

from ariaguard.known_attributes import default_known_attributes
from ariaguard.matchers import CamelCaseMatcher, HyphenatedMatcher, MatchOutcome, match_name


KNOWN = default_known_attributes()


@pytest.mark.parametrize(
    ("name", "outcome"),
    [
        ("aria-label", MatchOutcome.VALID),
        ("aria-LABEL", MatchOutcome.SUGGESTION),
        ("aria-foo", MatchOutcome.DEFERRED),
        ("aria-", MatchOutcome.DEFERRED),
        ("ariaLabel", MatchOutcome.SUGGESTION),
        ("ariaFooBar", MatchOutcome.INVALID),
        ("aria", MatchOutcome.UNMATCHED),
        ("role", MatchOutcome.UNMATCHED),
        ("aria label", MatchOutcome.UNMATCHED),
        ("Aria-Hidden", MatchOutcome.UNMATCHED),
    ],
)
def test_match_name_outcomes(name: str, outcome: MatchOutcome) -> None:
    assert match_name(name, KNOWN).outcome is outcome


def test_camel_case_matcher_only_handles_camel_case() -> None:
    assert CamelCaseMatcher().match("aria-hidden", KNOWN).outcome is MatchOutcome.UNMATCHED
    result = CamelCaseMatcher().match("ariaValueNow", KNOWN)
    assert result.args == ("ariaValueNow", "aria-valuenow")


def test_hyphenated_suggestion_carries_lowercase_form() -> None:
    result = HyphenatedMatcher().match("aria-Hidden", KNOWN)
    assert result.outcome is MatchOutcome.SUGGESTION
    assert result.args == ("aria-Hidden", "aria-hidden")
    assert result.needs_warning


def test_deferred_and_valid_results_need_no_immediate_warning() -> None:
    assert not HyphenatedMatcher().match("aria-foo", KNOWN).needs_warning
    assert not HyphenatedMatcher().match("aria-busy", KNOWN).needs_warning


def test_names_allow_xml_name_characters() -> None:
    assert match_name("aria-é.x_1:y", KNOWN).outcome is MatchOutcome.DEFERRED
    assert match_name("ariaÀ", KNOWN).outcome is MatchOutcome.UNMATCHED
