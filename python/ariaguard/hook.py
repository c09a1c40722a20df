# SPDX-License-Identifier: AGPL-3.0-only
"""Renderer-facing entry points for ARIA attribute-name validation.

A renderer calls the hook right before it mounts or updates an element. When
development mode is off the hook does nothing and the attribute vocabulary is
never loaded.
"""
from __future__ import annotations

import threading
import warnings
from typing import Any, Mapping

from .config import Config
from .diagnostics import AriaConfigWarning, DiagnosticSink
from .validator import AttributeNameValidator


class AriaPropsHook:
    def __init__(
        self,
        *,
        enabled: bool = True,
        validator: AttributeNameValidator | None = None,
        config: Config | None = None,
        sink: DiagnosticSink | None = None,
    ) -> None:
        self.enabled = enabled
        self._validator = validator
        self._config = config
        self._sink = sink
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config: Config | None = None, *, sink: DiagnosticSink | None = None) -> "AriaPropsHook":
        """Build a hook from ``config``; configuration mistakes raise ``ValueError`` here."""
        config = config if config is not None else Config.discover()
        hook = cls(enabled=config.is_dev_mode(), config=config, sink=sink)
        if hook.enabled:
            hook.validator  # loads the vocabulary now
        return hook

    @property
    def validator(self) -> AttributeNameValidator:
        with self._lock:
            if self._validator is None:
                config = self._config if self._config is not None else Config.defaults()
                self._validator = AttributeNameValidator(known=config.known_attributes(), sink=self._sink)
            return self._validator

    def validate_properties(self, tag_name: str, props: Mapping[str, Any], locator: Any = None) -> None:
        if not self.enabled:
            return
        self.validator.validate(tag_name, props, locator)

    def on_before_mount_component(self, locator: Any, element: Any) -> None:
        self._validate_element(locator, element)

    def on_before_update_component(self, locator: Any, element: Any) -> None:
        self._validate_element(locator, element)

    def reset(self) -> None:
        if self._validator is not None:
            self._validator.reset()

    def _validate_element(self, locator: Any, element: Any) -> None:
        if not self.enabled or element is None:
            return
        tag = getattr(element, "tag", None)
        if not isinstance(tag, str):
            return
        self.validator.validate(tag, getattr(element, "props", None) or {}, locator)


_default_hook: AriaPropsHook | None = None
_default_hook_lock = threading.Lock()


def configure_default_hook(config: Config | None = None, *, sink: DiagnosticSink | None = None) -> AriaPropsHook:
    """Build and install the process-wide hook; raises ``ValueError`` on bad configuration."""
    global _default_hook
    hook = AriaPropsHook.from_config(config, sink=sink)
    with _default_hook_lock:
        _default_hook = hook
    return hook


def get_default_hook() -> AriaPropsHook:
    """Return the process-wide hook, building it from discovered configuration on first use.

    A configuration error found here is surfaced
    as an ``AriaConfigWarning`` and validation stays off. Call
    ``configure_default_hook()`` at startup to get the error raised instead.
    """
    global _default_hook
    with _default_hook_lock:
        if _default_hook is None:
            try:
                _default_hook = AriaPropsHook.from_config()
            except (ValueError, OSError) as exc:
                warnings.warn(
                    f"ARIA attribute validation disabled: {exc}",
                    AriaConfigWarning,
                    stacklevel=2,
                )
                _default_hook = AriaPropsHook(enabled=False)
        return _default_hook


def set_default_hook(hook: AriaPropsHook | None) -> None:
    """Install ``hook`` process-wide; ``None`` rebuilds it from config on next use."""
    global _default_hook
    with _default_hook_lock:
        _default_hook = hook


def reset_warned_attributes() -> None:
    if _default_hook is not None:
        _default_hook.reset()


def validate_properties(tag_name: str, props: Mapping[str, Any], locator: Any = None) -> None:
    get_default_hook().validate_properties(tag_name, props, locator)


__all__ = [
    "AriaPropsHook",
    "configure_default_hook",
    "get_default_hook",
    "reset_warned_attributes",
    "set_default_hook",
    "validate_properties",
]
