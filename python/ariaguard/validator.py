# SPDX-License-Identifier: AGPL-3.0-only
"""Advisory validation of ARIA attribute names on standard markup elements."""
from __future__ import annotations

import threading
from typing import Any, Mapping, Sequence

from .custom_elements import CustomElementClassifier
from .diagnostics import DiagnosticSink, WarningsSink
from .known_attributes import KnownAttributeSet, default_known_attributes
from .matchers import DEFAULT_MATCHERS, MatchOutcome, match_name
from .warned_cache import WarnedCache


INVALID_PROP_TEMPLATE = "Invalid aria prop %s on <%s> tag."
INVALID_PROPS_TEMPLATE = "Invalid aria props %s on <%s> tag."


class AttributeNameValidator:
    """Report misnamed ``aria-*`` attributes, each distinct name at most once.

    ``validate`` never raises and never touches the property mapping; its only
    effect is zero or more diagnostics sent to the sink. Names that already
    produced a diagnostic are remembered in a ``WarnedCache`` and skipped on
    every later call, which keeps render loops from flooding the output.
    """

    def __init__(
        self,
        *,
        known: KnownAttributeSet | None = None,
        sink: DiagnosticSink | None = None,
        classifier: CustomElementClassifier | None = None,
        cache: WarnedCache | None = None,
        matchers: Sequence[Any] = DEFAULT_MATCHERS,
    ) -> None:
        self.known = known if known is not None else default_known_attributes()
        self.sink = sink if sink is not None else WarningsSink()
        self.classifier = classifier if classifier is not None else CustomElementClassifier()
        self.cache = cache if cache is not None else WarnedCache()
        self.matchers = tuple(matchers)
        self._lock = threading.RLock()

    def validate(self, tag_name: str, properties: Mapping[str, Any], locator: Any = None) -> None:
        props = properties or {}
        if self.classifier.is_custom_element(tag_name, props):
            return
        with self._lock:
            invalid: list[str] = []
            for name in props:
                if self._validate_name(name, locator):
                    continue
                invalid.append(name)
            if invalid:
                self._report_invalid(tag_name, invalid, locator)
                self.cache.mark_all(invalid)

    def reset(self) -> None:
        with self._lock:
            self.cache.clear()

    def _validate_name(self, name: Any, locator: Any) -> bool:
        """Return False when ``name`` belongs in the batched unknown report."""
        if not isinstance(name, str):
            return True
        if self.cache.is_warned(name):
            return True
        result = match_name(name, self.known, self.matchers)
        if result.outcome is MatchOutcome.DEFERRED:
            return False
        if result.needs_warning:
            self.sink.emit(False, result.template, *result.args, locator=locator)
            self.cache.mark(name)
        return True

    def _report_invalid(self, tag_name: str, invalid: list[str], locator: Any) -> None:
        rendered = ", ".join(f"`{name}`" for name in invalid)
        template = INVALID_PROP_TEMPLATE if len(invalid) == 1 else INVALID_PROPS_TEMPLATE
        self.sink.emit(False, template, rendered, tag_name, locator=locator)


__all__ = [
    "AttributeNameValidator",
    "INVALID_PROP_TEMPLATE",
    "INVALID_PROPS_TEMPLATE",
]
