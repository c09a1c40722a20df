from __future__ import annotations

from .core import Element, component, el, render_node, to_html

__all__ = ["Element", "component", "el", "render_node", "to_html"]
