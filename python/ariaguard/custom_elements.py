# SPDX-License-Identifier: AGPL-3.0-only
from __future__ import annotations

from typing import Any, Mapping


# Hyphenated names reserved by SVG and MathML; these are standard elements.
RESERVED_HYPHENATED_TAGS = frozenset(
    {
        "annotation-xml",
        "color-profile",
        "font-face",
        "font-face-src",
        "font-face-uri",
        "font-face-format",
        "font-face-name",
        "missing-glyph",
    }
)


def is_custom_element(tag_name: str, props: Mapping[str, Any] | None) -> bool:
    """Return True when ``tag_name``/``props`` describe an author-defined element.

    A tag without a hyphen is only custom when it is customized through a
    string ``is`` property (``<button is="fancy-button">``).
    """
    tag = str(tag_name)
    if "-" not in tag:
        return bool(props) and isinstance(props.get("is"), str)
    return tag not in RESERVED_HYPHENATED_TAGS


class CustomElementClassifier:
    def is_custom_element(self, tag_name: str, props: Mapping[str, Any] | None) -> bool:
        return is_custom_element(tag_name, props)


__all__ = ["CustomElementClassifier", "RESERVED_HYPHENATED_TAGS", "is_custom_element"]
