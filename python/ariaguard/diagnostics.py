# SPDX-License-Identifier: AGPL-3.0-only
"""Developer-facing diagnostic sinks.

Sinks receive printf-style templates (``%s`` placeholders) together with an
opaque locator supplied by the renderer. The locator is resolved into a short
"where did this happen" addendum appended to the message:

- ``None`` yields no addendum,
- a callable is invoked and its result used,
- anything else is converted with ``str()``.
"""
from __future__ import annotations

import os
import sys
import warnings
from dataclasses import dataclass
from typing import Any


_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__)) + os.sep


class AriaAttributeWarning(UserWarning):
    """Warning emitted for unrecognized or misspelled ARIA attribute names."""


class AriaConfigWarning(UserWarning):
    """Warning emitted when validation is switched off by a configuration error."""


@dataclass(frozen=True)
class DiagnosticEvent:
    message: str
    addendum: str = ""

    @property
    def text(self) -> str:
        return f"{self.message}{self.addendum}"

    def __str__(self) -> str:
        return self.text


def _format(template: str, args: tuple[Any, ...]) -> str:
    if not args:
        return template
    return template % args


class DiagnosticSink:
    """Conditional reporter; subclasses decide where events go."""

    def emit(self, condition: bool, template: str, *args: Any, locator: Any = None) -> None:
        if condition:
            return
        event = DiagnosticEvent(_format(template, args), self.stack_addendum(locator))
        self.report(event)

    def stack_addendum(self, locator: Any) -> str:
        if locator is None:
            return ""
        where = locator() if callable(locator) else locator
        if where is None:
            return ""
        text = str(where).strip()
        return f"\n    in {text}" if text else ""

    def report(self, event: DiagnosticEvent) -> None:
        raise NotImplementedError


def _outside_package_stacklevel() -> int:
    """Stack level of the first frame outside this package, relative to the caller."""
    frame = sys._getframe(1)
    level = 1
    while frame is not None and os.path.abspath(frame.f_code.co_filename).startswith(_PACKAGE_DIR):
        frame = frame.f_back
        level += 1
    return level


class WarningsSink(DiagnosticSink):
    def __init__(self, category: type[Warning] = AriaAttributeWarning, stacklevel: int | None = None) -> None:
        self.category = category
        self.stacklevel = stacklevel

    def report(self, event: DiagnosticEvent) -> None:
        # Without an explicit stacklevel, point at the code that called into the package.
        stacklevel = self.stacklevel if self.stacklevel is not None else _outside_package_stacklevel()
        warnings.warn(event.text, self.category, stacklevel=stacklevel)


class RecordingSink(DiagnosticSink):
    def __init__(self) -> None:
        self.events: list[DiagnosticEvent] = []

    def report(self, event: DiagnosticEvent) -> None:
        self.events.append(event)

    @property
    def messages(self) -> list[str]:
        return [event.message for event in self.events]

    def clear(self) -> None:
        self.events.clear()


__all__ = [
    "AriaAttributeWarning",
    "AriaConfigWarning",
    "DiagnosticEvent",
    "DiagnosticSink",
    "RecordingSink",
    "WarningsSink",
]
