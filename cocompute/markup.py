"""Shared HTML building blocks for the server-rendered pages."""

from __future__ import annotations

from html import escape
from typing import Optional

_LABEL_CLASS = "text-[#A1A1AA] text-[13px] font-medium"
_INPUT_CLASS = (
    "h-11 rounded-lg bg-[#111118] border border-[#27272A] px-3.5 text-white "
    "text-sm placeholder:text-[#52525B] focus:outline-none focus:border-indigo-500"
)
_HINT_CLASS = "text-[#52525B] text-xs"
_ERROR_CLASS = (
    "rounded-lg bg-red-500/10 border border-red-500/20 px-4 py-3 text-red-400 text-sm"
)


def _attr(value: str) -> str:
    return escape(value, quote=True)


def render_page(title: str, body: str) -> str:
    """Wrap already-rendered ``body`` markup in a complete HTML document."""
    return (
        "<!DOCTYPE html>"
        '<html lang="en">'
        "<head>"
        '<meta charset="utf-8">'
        '<meta name="viewport" content="width=device-width, initial-scale=1">'
        f"<title>{escape(title, quote=False)}</title>"
        "</head>"
        '<body class="bg-[#0A0A0F] text-[#A1A1AA] antialiased">'
        f'<div class="min-h-screen">{body}</div>'
        "</body>"
        "</html>"
    )


def text_input(
    label: str,
    input_type: str = "text",
    name: str = "",
    placeholder: str = "",
    required: bool = False,
    hint: Optional[str] = None,
) -> str:
    """A labelled form input, with an optional hint line beneath it."""
    attrs = [
        f'type="{_attr(input_type)}"',
        f'name="{_attr(name)}"',
        f'placeholder="{_attr(placeholder)}"',
    ]
    if required:
        attrs.append("required")
    attrs.append(f'class="{_INPUT_CLASS}"')
    hint_html = (
        f'<span class="{_HINT_CLASS}">{escape(hint, quote=False)}</span>'
        if hint
        else ""
    )
    return (
        '<label class="flex flex-col gap-2">'
        f'<span class="{_LABEL_CLASS}">{escape(label, quote=False)}</span>'
        f"<input {' '.join(attrs)}>"
        f"{hint_html}"
        "</label>"
    )


def icon(name: str, css_class: str = "") -> str:
    """A decorative icon placeholder element for the named icon."""
    classes = " ".join(part for part in ("icon", f"icon-{name}", css_class) if part)
    return (
        f'<span class="{_attr(classes)}" data-icon="{_attr(name)}" '
        'aria-hidden="true"></span>'
    )


def error_banner(message: str) -> str:
    """The red banner shown above a form when a submission failed."""
    return f'<div class="{_ERROR_CLASS}">{escape(message, quote=False)}</div>'