from __future__ import annotations

import threading

from ariaguard.custom_elements import CustomElementClassifier
from ariaguard.diagnostics import RecordingSink
from ariaguard.known_attributes import default_known_attributes
from ariaguard.validator import AttributeNameValidator


def test_canonical_names_emit_nothing(validator, sink) -> None:
    validator.validate("div", {"aria-hidden": "true", "aria-label": "Close", "aria-describedby": "help"})
    assert sink.events == []


def test_non_aria_names_are_ignored(validator, sink) -> None:
    validator.validate(
        "div",
        {"class": "x", "data-aria-foo": "1", "role": "button", "arialabel": "x", "ARIA-LABEL": "y"},
    )
    assert sink.events == []


def test_camel_case_unknown_name_is_invalid(validator, sink) -> None:
    validator.validate("div", {"ariaFooBar": "x"})
    assert sink.messages == [
        "Invalid ARIA attribute `ariaFooBar`. ARIA attributes follow the pattern aria-* and must be lowercase."
    ]


def test_camel_case_known_name_suggests_hyphenated_form(validator, sink) -> None:
    validator.validate("div", {"ariaHidden": "true"})
    assert sink.messages == ["Invalid ARIA attribute `ariaHidden`. Did you mean `aria-hidden`?"]


def test_camel_case_name_never_reaches_batched_report(validator, sink) -> None:
    validator.validate("div", {"ariaFooBar": "x"})
    assert len(sink.events) == 1
    assert not any("Invalid aria prop" in message for message in sink.messages)


def test_wrong_casing_suggests_lowercase(validator, sink) -> None:
    validator.validate("span", {"aria-Hidden": "true"})
    assert sink.messages == ["Unknown ARIA attribute `aria-Hidden`. Did you mean `aria-hidden`?"]


def test_single_unknown_name_uses_singular_message(validator, sink) -> None:
    validator.validate("button", {"aria-foo": 1, "title": "ok"})
    assert sink.messages == ["Invalid aria prop `aria-foo` on <button> tag."]


def test_unknown_names_are_batched_with_plural_message(validator, sink) -> None:
    validator.validate("div", {"aria-foo": 1, "aria-bar": 2})
    assert sink.messages == ["Invalid aria props `aria-foo`, `aria-bar` on <div> tag."]

    validator.validate("div", {"aria-foo": 1, "aria-bar": 2})
    validator.validate("section", {"aria-bar": 3})
    assert len(sink.events) == 1


def test_each_problem_is_reported_once_per_name(validator, sink) -> None:
    props = {"ariaHidden": True, "aria-Label": "x", "aria-nope": 1}
    for _ in range(50):
        validator.validate("div", props)
    assert len(sink.events) == 3
    assert sorted(validator.cache.snapshot()) == ["aria-Label", "aria-nope", "ariaHidden"]


def test_mixed_problems_are_reported_in_visit_order(validator, sink) -> None:
    validator.validate("div", {"aria-zzz": 1, "ariaLabel": "x", "aria-Busy": "true", "aria-yyy": 2})
    assert sink.messages == [
        "Invalid ARIA attribute `ariaLabel`. Did you mean `aria-label`?",
        "Unknown ARIA attribute `aria-Busy`. Did you mean `aria-busy`?",
        "Invalid aria props `aria-zzz`, `aria-yyy` on <div> tag.",
    ]


def test_custom_elements_are_bypassed(validator, sink) -> None:
    validator.validate("my-widget", {"ariaFoo": 1, "aria-nope": 2, "aria-Hidden": "true"})
    validator.validate("button", {"is": "fancy-button", "aria-nope": 2})
    assert sink.events == []
    assert len(validator.cache) == 0


def test_reserved_hyphenated_tags_are_validated(validator, sink) -> None:
    validator.validate("font-face", {"aria-nope": 1})
    assert sink.messages == ["Invalid aria prop `aria-nope` on <font-face> tag."]


def test_injected_classifier_is_consulted_once_per_call(sink) -> None:
    calls: list[tuple[str, dict]] = []

    class Recording(CustomElementClassifier):
        def is_custom_element(self, tag_name, props):
            calls.append((tag_name, dict(props)))
            return True

    validator = AttributeNameValidator(sink=sink, classifier=Recording())
    validator.validate("div", {"aria-nope": 1})
    assert calls == [("div", {"aria-nope": 1})]
    assert sink.events == []


def test_locator_is_forwarded_as_addendum(validator, sink) -> None:
    validator.validate("div", {"aria-nope": 1}, "/main[1]/div[2]")
    assert sink.events[0].addendum == "\n    in /main[1]/div[2]"
    assert sink.events[0].text.endswith("in /main[1]/div[2]")


def test_properties_are_never_mutated(validator) -> None:
    props = {"ariaHidden": True, "aria-nope": 1, "aria-label": "x"}
    before = dict(props)
    validator.validate("div", props)
    assert props == before


def test_empty_and_none_properties(validator, sink) -> None:
    validator.validate("div", {})
    validator.validate("div", None)
    assert sink.events == []


def test_reset_allows_names_to_warn_again(validator, sink) -> None:
    validator.validate("div", {"aria-nope": 1})
    validator.reset()
    validator.validate("div", {"aria-nope": 1})
    assert len(sink.events) == 2


def test_previously_warned_name_is_not_reevaluated_after_vocabulary_change(sink) -> None:
    validator = AttributeNameValidator(sink=sink)
    validator.validate("div", {"aria-braillelabel": "x"})
    assert len(sink.events) == 1

    validator.known = default_known_attributes().with_extra(["aria-braillelabel"])
    validator.validate("div", {"aria-braillelabel": "x", "aria-Braillelabel": "y"})
    assert sink.messages[1:] == [
        "Unknown ARIA attribute `aria-Braillelabel`. Did you mean `aria-braillelabel`?"
    ]


def test_concurrent_validation_reports_each_name_once() -> None:
    sink = RecordingSink()
    validator = AttributeNameValidator(sink=sink)
    props = {f"aria-unknown{i}": i for i in range(20)}
    barrier = threading.Barrier(8)

    def worker() -> None:
        barrier.wait()
        for _ in range(25):
            validator.validate("div", props)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(sink.events) == 1
    assert len(validator.cache) == 20


def test_non_string_keys_are_skipped(validator, sink) -> None:
    validator.validate("div", {1: "x", None: "y", ("aria-foo",): "z", "aria-nope": 2})
    assert sink.messages == ["Invalid aria prop `aria-nope` on <div> tag."]
    assert validator.cache.snapshot() == frozenset({"aria-nope"})
