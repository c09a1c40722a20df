# SPDX-License-Identifier: AGPL-3.0-only
"""Development-time validation of ARIA attribute names on markup elements.

The validator only ever warns: unknown ``aria-*`` names, wrong casing and
camel-cased spellings are reported once per distinct name for the lifetime of
the process, and rendering always continues.
"""
from .config import Config
from .custom_elements import CustomElementClassifier, is_custom_element
from .diagnostics import (
    AriaAttributeWarning,
    AriaConfigWarning,
    DiagnosticEvent,
    DiagnosticSink,
    RecordingSink,
    WarningsSink,
)
from .hook import (
    AriaPropsHook,
    configure_default_hook,
    get_default_hook,
    reset_warned_attributes,
    set_default_hook,
    validate_properties,
)
from .known_attributes import ARIA_ATTRIBUTE_NAMES, KnownAttributeSet, default_known_attributes
from .matchers import MatchOutcome, MatchResult
from .validator import AttributeNameValidator
from .warned_cache import WarnedCache

__all__ = [
    "ARIA_ATTRIBUTE_NAMES",
    "AriaAttributeWarning",
    "AriaConfigWarning",
    "AriaPropsHook",
    "AttributeNameValidator",
    "Config",
    "CustomElementClassifier",
    "DiagnosticEvent",
    "DiagnosticSink",
    "KnownAttributeSet",
    "MatchOutcome",
    "MatchResult",
    "RecordingSink",
    "WarnedCache",
    "WarningsSink",
    "configure_default_hook",
    "default_known_attributes",
    "get_default_hook",
    "is_custom_element",
    "reset_warned_attributes",
    "set_default_hook",
    "validate_properties",
]
