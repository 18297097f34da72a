"""The public landing page."""

from __future__ import annotations

from html import escape
from typing import Any

from cocompute.markup import icon, render_page
from cocompute.total_compute import TotalComputeCache, humanize_ms

STATUS_URL = "/status"
SOURCE_URL = "/source"

_CARD_CLASS = "rounded-xl bg-[#16161E] border border-[#27272A]"
_NAV_LINK_CLASS = "text-[#A1A1AA] text-sm font-medium hover:text-white transition"
_PRIMARY_BUTTON_CLASS = (
    "rounded-lg bg-indigo-500 px-5 py-2.5 text-white text-sm font-semibold "
    "hover:bg-indigo-600 transition"
)
_SECONDARY_BUTTON_CLASS = (
    "rounded-lg bg-[#27272A] border border-[#3F3F46] px-5 py-2.5 text-[#A1A1AA] "
    "text-sm font-semibold hover:text-white hover:border-[#52525B] transition"
)


def _attr(value: str) -> str:
    return escape(value, quote=True)


def _text(value: str) -> str:
    return escape(value, quote=False)


def _external_link(href: str, css_class: str, inner: str) -> str:
    return (
        f'<a href="{_attr(href)}" target="_blank" rel="noopener" '
        f'class="{css_class}">{inner}</a>'
    )


def _feature_card(
    icon_name: str,
    title: str,
    description: str,
    badge: tuple[str, str] | None = None,
) -> str:
    badge_html = ""
    if badge is not None:
        label, badge_class = badge
        badge_html = (
            f'<span class="rounded-full px-2 py-0.5 text-[10px] font-bold '
            f'{_attr(badge_class)}">{_text(label)}</span>'
        )
    return (
        f'<div class="{_CARD_CLASS} p-6 flex flex-col gap-3">'
        '<div class="flex items-center justify-between">'
        f'{icon(icon_name, "w-6 h-6 text-indigo-400")}'
        f"{badge_html}"
        "</div>"
        f'<h3 class="text-white text-lg font-bold">{_text(title)}</h3>'
        f'<p class="text-[#A1A1AA] text-sm leading-relaxed">{_text(description)}</p>'
        "</div>"
    )


def _check_item(text: str, green: bool = False) -> str:
    colour = "text-emerald-500" if green else "text-indigo-400"
    return (
        '<li class="flex items-center gap-2.5">'
        f'{icon("check", f"w-4 h-4 {colour}")}'
        f'<span class="text-[#A1A1AA] text-sm">{_text(text)}</span>'
        "</li>"
    )


def _nav(logged_in: bool) -> str:
    if logged_in:
        account_links = (
            f'<a href="/dashboard" class="{_PRIMARY_BUTTON_CLASS}">Dashboard</a>'
        )
    else:
        account_links = (
            f'<a href="/login" class="{_NAV_LINK_CLASS}">Log in</a>'
            f'<a href="/beta" class="hidden md:inline-block {_PRIMARY_BUTTON_CLASS}">'
            "Sign up</a>"
        )
    return (
        '<nav class="flex items-center justify-between px-6 py-4">'
        '<span class="text-white font-bold text-lg">cocompute</span>'
        '<div class="flex items-center gap-5">'
        + _external_link(STATUS_URL, _NAV_LINK_CLASS, "Status")
        + _external_link(
            SOURCE_URL,
            f"{_NAV_LINK_CLASS} flex items-center gap-1.5",
            f'{icon("github", "w-4 h-4")}GitHub',
        )
        + account_links
        + "</div></nav>"
    )


def _hero(total_compute: str, script_url: str) -> str:
    return (
        '<section class="flex flex-col items-center px-6 pt-20 pb-16">'
        '<div class="mb-5 inline-flex items-center gap-2 rounded-full bg-[#16161E] '
        'border border-[#27272A] px-3 py-1.5">'
        '<span class="w-1.5 h-1.5 rounded-full bg-emerald-400"></span>'
        '<span class="text-[#A1A1AA] text-xs font-medium">'
        "Open source · AGPLv3 · Self-host or hosted · No crypto</span>"
        "</div>"
        '<h1 class="text-white text-5xl font-bold text-center leading-tight max-w-3xl">'
        "Your GPU, your inference.<br>"
        '<span class="text-[#A1A1AA]">Open infrastructure for the rest of us.</span>'
        "</h1>"
        '<p class="mt-5 text-[#A1A1AA] text-base text-center max-w-xl leading-relaxed">'
        "cocompute is open infrastructure for cooperative LLM inference on consumer "
        "hardware. Share your GPU (NVIDIA, AMD, Apple Silicon, anything Ollama runs on) "
        "over the internet. Use the pool through an OpenAI-compatible API. Self-host "
        "the whole stack, or use cocompute.ai."
        "</p>"
        '<div class="mt-10 flex flex-wrap items-center justify-center gap-3">'
        '<a href="/quickstart" class="rounded-lg bg-indigo-500 px-7 py-3.5 text-white '
        'font-semibold hover:bg-indigo-600 transition">Get started</a>'
        + _external_link(
            SOURCE_URL,
            "rounded-lg bg-[#27272A] border border-[#3F3F46] px-7 py-3.5 text-[#A1A1AA] "
            "font-semibold hover:text-white hover:border-[#52525B] transition flex "
            "items-center gap-2",
            f'{icon("github", "w-[18px] h-[18px]")}View on GitHub',
        )
        + "</div>"
        '<div class="mt-8 inline-flex items-center gap-2 rounded-full bg-[#16161E] '
        'border border-[#27272A] px-4 py-2">'
        '<span class="text-[#A1A1AA] text-xs font-medium">Total time computed</span>'
        '<span class="text-white text-xs font-semibold tabular-nums">'
        f"{_text(total_compute)}</span>"
        "</div>"
        '<div id="network-sc" class="mt-12 w-full max-w-4xl rounded-2xl overflow-hidden '
        'max-sm:aspect-auto max-sm:min-h-[720px]" '
        'style="position:relative;aspect-ratio:2.1/1;min-height:460px">'
        '<canvas id="network-cv" '
        'style="position:absolute;top:0;left:0;width:100%;height:100%"></canvas>'
        '<div id="network-ui" style="position:absolute;top:0;left:0;width:100%;'
        "height:100%;pointer-events:none;font-family:-apple-system,BlinkMacSystemFont,"
        "'Segoe UI',Roboto,Helvetica,Arial,sans-serif\"></div>"
        "</div>"
        f'<script src="{_attr(script_url)}" defer></script>'
        "</section>"
    )


def _value_prop() -> str:
    return (
        '<section class="px-6 py-16 flex flex-col items-center">'
        '<div class="grid grid-cols-1 md:grid-cols-2 gap-8 max-w-4xl w-full">'
        f'<div class="{_CARD_CLASS} p-8">'
        '<h3 class="text-emerald-400 text-lg font-bold mb-2">Have a GPU?</h3>'
        '<p class="text-[#A1A1AA] text-sm leading-relaxed">'
        "Share your idle hardware with the pool. Anything Ollama runs on works: NVIDIA, "
        "AMD, Apple Silicon, even CPU. One command to install, runs as a background "
        "service. In return, access every GPU in the network."
        "</p></div>"
        f'<div class="{_CARD_CLASS} p-8">'
        '<h3 class="text-indigo-400 text-lg font-bold mb-2">Need inference?</h3>'
        '<p class="text-[#A1A1AA] text-sm leading-relaxed">'
        + _text(
            "Point your apps at cocompute's OpenAI-compatible API. Access GPUs shared "
            "by others without buying hardware or paying cloud prices."
        )
        + "</p></div>"
        "</div>"
        '<a href="/quickstart" class="mt-8 text-indigo-400 text-sm font-medium '
        'hover:underline">Get started in 60 seconds →</a>'
        "</section>"
    )


def _how_it_works() -> str:
    return (
        '<section class="px-6 py-16 flex flex-col items-center">'
        '<h2 class="text-white text-3xl font-bold text-center">How it works</h2>'
        '<p class="mt-3 text-[#71717A] text-base text-center">'
        "Open source protocol, hosted as a service, or self-hosted.</p>"
        '<div class="mt-10 grid grid-cols-1 md:grid-cols-3 gap-5 w-full max-w-5xl">'
        + _feature_card(
            "monitor",
            "Bring your hardware",
            "Install cocompute on any machine that runs Ollama. Your GPU joins the pool "
            "from your home network. We handle the NAT traversal and hole punching, so "
            "no port forwarding, no router config.",
            badge=("FREE", "bg-emerald-500/20 text-emerald-500"),
        )
        + _feature_card(
            "code",
            "OpenAI-compatible API",
            "Drop-in replacement for the OpenAI SDK. Same /v1/ endpoints, works with "
            "every existing tool and client.",
        )
        + _feature_card(
            "cpu",
            "Cooperative pools",
            "Share with friends, your team, or the public pool. Pool-credit accounting "
            "tracks reciprocity. No tokens, no crypto.",
        )
        + "</div></section>"
    )


def _open_source() -> str:
    return (
        '<section class="px-6 py-16 flex flex-col items-center">'
        '<div class="max-w-3xl w-full rounded-2xl bg-gradient-to-br from-[#16161E] '
        'to-[#0E0E15] border border-[#27272A] p-10">'
        '<h2 class="text-white text-2xl font-bold">Open source. AGPLv3.</h2>'
        '<p class="mt-2 text-[#A1A1AA] text-sm leading-relaxed">'
        + _text(
            "cocompute is free software you can self-host, fork, and modify. The code "
            "that runs cocompute.ai is the same code in the public repo. cocompute.ai "
            "is the hosted version for people who don't want to operate their own "
            "orchestrator."
        )
        + "</p>"
        '<div class="mt-5 flex flex-wrap gap-3">'
        + _external_link(
            SOURCE_URL,
            f"{_SECONDARY_BUTTON_CLASS} flex items-center gap-2",
            f'{icon("github", "w-4 h-4")}Source code',
        )
        + f'<a href="/quickstart" class="{_SECONDARY_BUTTON_CLASS}">Self-hosting guide</a>'
        "</div></div></section>"
    )


def _plans() -> str:
    self_host_items = "".join(
        _check_item(text)
        for text in (
            "Full source code, MIT-style stack on your terms",
            "Complete control over hosts and pools",
            "Run on your own infra, your own domain",
            "No telemetry, no third party",
            "Modify, fork, extend",
        )
    )
    hosted_items = "".join(
        _check_item(text, green=True)
        for text in (
            "One command to register a host",
            "Join the public pool",
            "OpenAI-compatible /v1/ API endpoint",
            "No infra to operate",
            "Optional paid tier coming for marketplace compute",
        )
    )
    return (
        '<section class="px-6 py-20 flex flex-col items-center max-w-5xl mx-auto">'
        '<h2 class="text-white text-3xl font-bold">Two ways to run cocompute</h2>'
        '<p class="mt-2 text-[#71717A] text-base text-center max-w-xl">'
        "Same protocol either way. Pick whichever fits your trust model.</p>"
        '<div class="mt-12 grid grid-cols-1 md:grid-cols-2 gap-6 w-full">'
        f'<div class="{_CARD_CLASS} p-8 flex flex-col gap-6">'
        "<div>"
        '<h3 class="text-white text-2xl font-bold">Self-host</h3>'
        '<p class="mt-2 text-emerald-500 text-4xl font-bold">Free</p>'
        '<p class="mt-1 text-[#71717A] text-sm">AGPLv3 · run your own orchestrator</p>'
        "</div>"
        '<hr class="border-[#27272A]">'
        f'<ul class="flex flex-col gap-3.5">{self_host_items}</ul>'
        "</div>"
        '<div class="rounded-xl bg-[#16161E] border-2 border-indigo-500 p-8 flex '
        'flex-col gap-6">'
        "<div>"
        '<h3 class="text-white text-2xl font-bold">cocompute.ai</h3>'
        '<p class="mt-2 text-emerald-500 text-4xl font-bold">Free to start</p>'
        '<p class="mt-1 text-[#71717A] text-sm">Hosted orchestrator · zero ops</p>'
        "</div>"
        '<hr class="border-[#27272A]">'
        f'<ul class="flex flex-col gap-3.5">{hosted_items}</ul>'
        "</div>"
        "</div>"
        '<div class="mt-16 w-full">'
        '<hr class="border-[#1E1E26]">'
        '<div class="flex flex-col items-center gap-4 pt-8" id="beta">'
        '<h3 class="text-white text-xl font-semibold">'
        "Ready to run inference on your own terms?</h3>"
        '<p class="text-[#71717A] text-sm">Free signup. No credit card.</p>'
        '<a href="/beta" class="mt-2 flex items-center gap-2 rounded-lg bg-indigo-500 '
        'px-8 py-3.5 text-white font-semibold hover:bg-indigo-600 transition">'
        f'{icon("sparkles", "w-[18px] h-[18px]")}Sign up</a>'
        '<p class="mt-4 text-[#3F3F46] text-xs">cocompute · '
        + _external_link(SOURCE_URL, "hover:text-[#A1A1AA] transition", "GitHub")
        + " · AGPLv3</p>"
        "</div></div>"
        "</section>"
    )


def landing_page(logged_in: bool, total_compute: str, script_url: str) -> str:
    """Render the landing page.

    ``total_compute`` is the already humanized total compute time and
    ``script_url`` the address of the network animation script.
    """
    body = (
        _nav(logged_in)
        + _hero(total_compute, script_url)
        + _value_prop()
        + _how_it_works()
        + _open_source()
        + _plans()
    )
    return render_page("cocompute", body)


def landing(
    logged_in: bool,
    cache: TotalComputeCache,
    db: Any,
    script_url: str,
) -> str:
    """Render the landing page with the cached total compute time from ``db``."""
    total_compute = humanize_ms(cache.get(db))
    return landing_page(logged_in, total_compute, script_url)