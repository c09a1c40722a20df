# SPDX-License-Identifier: AGPL-3.0-only
"""Vocabulary of recognized WAI-ARIA attribute names."""
from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Iterator


ARIA_ATTRIBUTE_NAMES = (
    # Global attributes
    "aria-current",
    "aria-details",
    "aria-disabled",
    "aria-hidden",
    "aria-invalid",
    "aria-keyshortcuts",
    "aria-label",
    "aria-roledescription",
    # Widget attributes
    "aria-autocomplete",
    "aria-checked",
    "aria-expanded",
    "aria-haspopup",
    "aria-level",
    "aria-modal",
    "aria-multiline",
    "aria-multiselectable",
    "aria-orientation",
    "aria-placeholder",
    "aria-pressed",
    "aria-readonly",
    "aria-required",
    "aria-selected",
    "aria-sort",
    "aria-valuemax",
    "aria-valuemin",
    "aria-valuenow",
    "aria-valuetext",
    # Live region attributes
    "aria-atomic",
    "aria-busy",
    "aria-live",
    "aria-relevant",
    # Drag-and-drop attributes
    "aria-dropeffect",
    "aria-grabbed",
    # Relationship attributes
    "aria-activedescendant",
    "aria-colcount",
    "aria-colindex",
    "aria-colspan",
    "aria-controls",
    "aria-describedby",
    "aria-errormessage",
    "aria-flowto",
    "aria-labelledby",
    "aria-owns",
    "aria-posinset",
    "aria-rowcount",
    "aria-rowindex",
    "aria-rowspan",
    "aria-setsize",
)

_CANONICAL_NAME = re.compile(r"aria-[a-z]+")


@dataclass(frozen=True)
class KnownAttributeSet:
    names: frozenset[str]

    def __post_init__(self) -> None:
        object.__setattr__(self, "names", frozenset(self.names))

    def __contains__(self, name: object) -> bool:
        return name in self.names

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.names))

    def __len__(self) -> int:
        return len(self.names)

    def with_extra(self, extra: Iterable[str]) -> "KnownAttributeSet":
        """Return a new set that also recognizes ``extra``.

        Every added name must already be canonical (``aria-`` followed by a
        lowercase word); anything else is a configuration mistake.
        """
        added: set[str] = set()
        for raw in extra:
            name = str(raw).strip()
            if not is_canonical_name(name):
                raise ValueError(
                    f"Extra ARIA attribute {raw!r} must follow the pattern aria-<word> in lowercase."
                )
            added.add(name)
        if not added:
            return self
        return KnownAttributeSet(self.names | added)


def is_canonical_name(name: str) -> bool:
    return bool(_CANONICAL_NAME.fullmatch(name))


@lru_cache(maxsize=1)
def default_known_attributes() -> KnownAttributeSet:
    return KnownAttributeSet(frozenset(ARIA_ATTRIBUTE_NAMES))


__all__ = [
    "ARIA_ATTRIBUTE_NAMES",
    "KnownAttributeSet",
    "default_known_attributes",
    "is_canonical_name",
]
