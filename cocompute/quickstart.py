"""The quickstart page: how to share a GPU and how to use the pool."""

from __future__ import annotations

from html import escape

from cocompute.landing import SOURCE_URL
from cocompute.markup import icon, render_page

_PRIMARY_BUTTON_CLASS = (
    "rounded-lg bg-indigo-500 px-5 py-2.5 text-white text-sm font-semibold "
    "hover:bg-indigo-600 transition"
)
_SECONDARY_BUTTON_CLASS = (
    "rounded-lg bg-[#27272A] px-5 py-2.5 text-[#A1A1AA] text-sm font-medium "
    "hover:text-white transition"
)
_CODE_CLASS = (
    "bg-[#111118] border border-[#27272A] rounded-lg p-4 font-mono text-xs "
    "text-[#67e8f9] break-all"
)
_BODY_CLASS = "text-[#A1A1AA] text-sm"
_NOTE_CLASS = "text-[#52525B] text-xs"

_COPY_NOTE = ". Copy the key. It looks like a long random string. You'll only see it once."


def _attr(value: str) -> str:
    return escape(value, quote=True)


def _text(value: str) -> str:
    return escape(value, quote=False)


def host_install_command(base_url: str) -> str:
    """The one-line command that installs the host service against ``base_url``."""
    return (
        f"curl -sSf {base_url}/install.sh | COCOMPUTE_URL={base_url} "
        "bash -s -- --token YOUR_TOKEN"
    )


def consumer_curl_command(base_url: str) -> str:
    """A sample chat-completion request against the pool at ``base_url``."""
    return (
        f"curl {base_url}/v1/chat/completions \\\n"
        '  -H "Authorization: Bearer YOUR_API_KEY" \\\n'
        '  -H "Content-Type: application/json" \\\n'
        "  -d '{\"model\":\"llama3.2\",\"messages\":"
        "[{\"role\":\"user\",\"content\":\"hello\"}]}'"
    )


def list_models_command(base_url: str) -> str:
    """A sample request listing the models available at ``base_url``."""
    return f'curl {base_url}/v1/models -H "Authorization: Bearer YOUR_API_KEY"'


def _paragraph(text: str, css_class: str = _BODY_CLASS) -> str:
    return f'<p class="{css_class}">{_text(text)}</p>'


def _code_block(command: str, extra_class: str = "") -> str:
    classes = f"{_CODE_CLASS} {extra_class}" if extra_class else _CODE_CLASS
    return f'<div class="{classes}">{_text(command)}</div>'


def _sign_up_button() -> str:
    return (
        "<div>"
        f'<a href="/beta" class="inline-block {_PRIMARY_BUTTON_CLASS}">Sign up</a>'
        "</div>"
    )


def _step(num: str, title: str, children: str) -> str:
    return (
        '<div class="mb-10">'
        '<div class="flex items-center gap-3 mb-3">'
        '<span class="flex items-center justify-center w-7 h-7 rounded-full '
        f'bg-indigo-500/20 text-indigo-400 text-sm font-bold">{_text(num)}</span>'
        f'<h3 class="text-white text-lg font-bold">{_text(title)}</h3>'
        "</div>"
        f'<div class="ml-10 flex flex-col gap-3">{children}</div>'
        "</div>"
    )


def _chooser_card(
    href: str, eyebrow: str, title: str, description: str, accent_color: str
) -> str:
    eyebrow_class = (
        f"text-{accent_color} text-xs font-bold uppercase tracking-wider mb-2"
    )
    return (
        f'<a href="{_attr(href)}" class="group rounded-xl bg-[#16161E] border '
        "border-[#27272A] p-6 hover:border-[#3F3F46] hover:bg-[#1A1A24] transition "
        'flex flex-col">'
        f'<span class="{_attr(eyebrow_class)}">{_text(eyebrow)}</span>'
        f'<h2 class="text-white text-xl font-bold mb-2">{_text(title)}</h2>'
        '<p class="text-[#A1A1AA] text-sm leading-relaxed flex-1">'
        f"{_text(description)}</p>"
        '<div class="mt-4 text-indigo-400 text-sm font-medium">Jump to steps →</div>'
        "</a>"
    )


def _section_header(section_id: str, eyebrow: str, accent: str, title: str,
                    subtitle: str, margin: str) -> str:
    return (
        f'<section id="{section_id}" class="scroll-mt-8 {margin}">'
        '<div class="flex items-baseline gap-3 mb-2">'
        f'<span class="text-{accent} text-xs font-bold uppercase tracking-wider">'
        f"{_text(eyebrow)}</span>"
        "</div>"
        f'<h2 class="text-white text-2xl font-bold mb-1">{_text(title)}</h2>'
        f'<p class="text-[#71717A] text-sm mb-8">{_text(subtitle)}</p>'
    )


def _share_gpu_section(base_url: str) -> str:
    install = _step(
        "2",
        "Install the host binary",
        f'<p class="{_BODY_CLASS}">From your dashboard, click '
        '<span class="text-white font-medium">Add Host</span>'
        " to get a one-line install command. Run it on any machine that runs Ollama:"
        "</p>"
        + _code_block(host_install_command(base_url))
        + _paragraph(
            "Works on Linux (systemd) and macOS (launchd). Runs as a background "
            "service. Anything Ollama supports works: NVIDIA, AMD, Apple Silicon, "
            "even CPU.",
            _NOTE_CLASS,
        ),
    )
    pool = _step(
        "3",
        "Add your host to a pool",
        _paragraph(
            "Back in the dashboard, create a pool (or pick the global pool) and add "
            "your host. As soon as your host registers, it shows up online and is "
            "ready to serve inference."
        )
        + _paragraph(
            "Pool-credit accounting tracks reciprocity. Cycles you contribute earn "
            "cycles you can spend. No tokens, no crypto.",
            _NOTE_CLASS,
        ),
    )
    return (
        _section_header(
            "share-gpu",
            "Host",
            "emerald-400",
            "Share your GPU",
            "Three steps. About 5 minutes if you already have Ollama installed.",
            "mb-20",
        )
        + _step(
            "1",
            "Sign up",
            _paragraph("Create a free account so you can manage your hosts and pools.")
            + _sign_up_button(),
        )
        + install
        + pool
        + "</section>"
    )


def _use_pool_section(base_url: str) -> str:
    key_step = _step(
        "2",
        "Create an API key",
        f'<p class="{_BODY_CLASS}">From your dashboard, find the pool you want to use '
        'and click <span class="text-white font-medium">New API Key</span>'
        f"{_text(_COPY_NOTE)}"
        "</p>"
        + _paragraph(
            "API keys are scoped to a pool. They only have access to the hosts in "
            "that pool.",
            _NOTE_CLASS,
        ),
    )
    first_call = _step(
        "3",
        "Make your first call",
        _paragraph("Drop your key in and call the OpenAI-compatible endpoint:")
        + _code_block(consumer_curl_command(base_url), "whitespace-pre-wrap")
        + _paragraph(
            "Or list which models the pool has available:", f"{_BODY_CLASS} mt-2"
        )
        + _code_block(list_models_command(base_url))
        + _paragraph(
            "Works with any OpenAI-compatible client (the official OpenAI SDK, "
            "openwebui, llama.cpp clients). Just change the base URL.",
            _NOTE_CLASS,
        ),
    )
    return (
        _section_header(
            "use-pool",
            "Consumer",
            "indigo-400",
            "Use the pool",
            "Three steps. About 2 minutes if you have a curl handy.",
            "mb-12",
        )
        + _step(
            "1",
            "Sign up",
            _paragraph("Create a free account.") + _sign_up_button(),
        )
        + key_step
        + first_call
        + "</section>"
    )


def _footer() -> str:
    return (
        '<div class="border-t border-[#27272A] pt-8 mt-4">'
        '<h2 class="text-white text-lg font-bold mb-2">Stuck?</h2>'
        '<p class="text-[#A1A1AA] text-sm mb-4">'
        "Open an issue on GitHub or read the source. cocompute is AGPL — every line "
        "is yours to inspect.</p>"
        '<div class="flex flex-wrap gap-3">'
        f'<a href="/beta" class="{_PRIMARY_BUTTON_CLASS}">Sign up</a>'
        f'<a href="{_attr(SOURCE_URL)}" target="_blank" rel="noopener" '
        f'class="{_SECONDARY_BUTTON_CLASS} flex items-center gap-2">'
        f'{icon("github", "w-4 h-4")}View source</a>'
        f'<a href="/" class="{_SECONDARY_BUTTON_CLASS}">Back to home</a>'
        "</div>"
        "</div>"
    )


def quickstart_page(base_url: str) -> str:
    """Render the quickstart page with commands pointing at ``base_url``."""
    chooser = (
        '<div class="grid grid-cols-1 md:grid-cols-2 gap-4 mb-16">'
        + _chooser_card(
            "#share-gpu",
            "Host",
            "Share your GPU",
            "You have a GPU sitting idle. Install the host binary, join the pool, and "
            "get access to other people's GPUs in return.",
            "emerald-400",
        )
        + _chooser_card(
            "#use-pool",
            "Consumer",
            "Use the pool",
            "You want LLM inference but don't want to buy hardware. Sign up, get an "
            "API key, point your apps at our OpenAI-compatible endpoint.",
            "indigo-400",
        )
        + "</div>"
    )
    body = (
        '<div class="max-w-3xl mx-auto px-6 py-16">'
        '<h1 class="text-white text-4xl font-bold mb-2">Get started in 60 seconds</h1>'
        '<p class="text-[#71717A] text-base mb-10">'
        "Pick how you want to use cocompute. You can do both.</p>"
        + chooser
        + _share_gpu_section(base_url)
        + _use_pool_section(base_url)
        + _footer()
        + "</div>"
    )
    return render_page("cocompute — quickstart", body)