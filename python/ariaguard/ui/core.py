from __future__ import annotations

from dataclasses import dataclass, field
from html import escape
from typing import Any, Callable

from ..hook import AriaPropsHook, get_default_hook


@dataclass
class Element:
    tag: str
    props: dict[str, Any] = field(default_factory=dict)
    children: list[Any] = field(default_factory=list)

    def to_html(self, *, hook: AriaPropsHook | None = None) -> str:
        return to_html(self, hook=hook)

    def attributes(self) -> dict[str, Any]:
        """Props keyed by the attribute names they render as."""
        return {_normalize_attr_name(key): value for key, value in self.props.items()}


def component(fn: Callable) -> Callable:
    """Marker decorator for function components."""
    fn.__ariaguard_component__ = True
    return fn


def el(tag: str, *children: Any, **props: Any) -> Element:
    flat: list[Any] = []
    for child in children:
        if child is None:
            continue
        if isinstance(child, (list, tuple)):
            flat.extend(x for x in child if x is not None)
        else:
            flat.append(child)
    return Element(tag=tag, props=props, children=flat)


def _normalize_attr_name(name: str) -> str:
    if name == "class_name":
        return "class"
    return name.replace("_", "-")


def _normalize_tag(tag: str) -> str:
    return str(tag).strip().lower()


def _render_attrs(attrs: dict[str, Any]) -> str:
    parts: list[str] = []
    for attr, value in attrs.items():
        if value is None or value is False:
            continue
        if value is True:
            parts.append(attr)
        else:
            parts.append(f'{attr}="{escape(str(value), quote=True)}"')
    return (" " + " ".join(parts)) if parts else ""


def _render(node: Any, path: str, hook: AriaPropsHook) -> str:
    if node is None:
        return ""
    if isinstance(node, Element):
        attrs = node.attributes()
        # Props are checked as rendered, so `aria_label` is seen as `aria-label`.
        hook.validate_properties(node.tag, attrs, path)
        parts: list[str] = []
        idx = 0
        for child in node.children:
            if isinstance(child, Element):
                idx += 1
                parts.append(_render(child, f"{path}/{_normalize_tag(child.tag)}[{idx}]", hook))
            else:
                parts.append(_render(child, path, hook))
        return f"<{node.tag}{_render_attrs(attrs)}>{''.join(parts)}</{node.tag}>"
    if isinstance(node, (list, tuple)):
        return "".join(_render(item, path, hook) for item in node)
    return escape(str(node))


def render_node(node: Any, *, hook: AriaPropsHook | None = None) -> str:
    active = hook if hook is not None else get_default_hook()
    if isinstance(node, Element):
        return _render(node, f"/{_normalize_tag(node.tag)}[1]", active)
    return _render(node, "/fragment", active)


def to_html(node: Any, *, hook: AriaPropsHook | None = None) -> str:
    return render_node(node, hook=hook)


__all__ = ["Element", "component", "el", "render_node", "to_html"]
