"""Account pages: sign-up, sign-in, password reset and e-mail verification."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from html import escape
from typing import Optional

from cocompute.markup import error_banner, icon, render_page, text_input

RESET_LINK_LIFETIME = timedelta(hours=1)
VERIFY_LINK_LIFETIME = timedelta(hours=48)

TURNSTILE_SCRIPT_URL = "https://challenges.cloudflare.com/turnstile/v0/api.js"

_CARD_CLASS = "rounded-xl bg-[#16161E] border border-[#27272A]"
_SUBMIT_CLASS = (
    "h-11 rounded-lg bg-indigo-500 text-white text-sm font-semibold "
    "hover:bg-indigo-600 transition cursor-pointer"
)
_LINK_CLASS = "text-indigo-500 text-sm font-medium hover:underline"
_SUCCESS_CLASS = (
    "rounded-lg bg-emerald-500/10 border border-emerald-500/20 px-4 py-3 "
    "text-emerald-400 text-sm"
)

_SIGNUP_BLURB = "Free signup. Tell us how you'd use cocompute and we'll be in touch."
_SPAM_HINT = "Didn't get it? Check your spam folder, or wait a minute and refresh."


def _attr(value: str) -> str:
    return escape(value, quote=True)


def _text(value: str) -> str:
    return escape(value, quote=False)


def _centered(inner: str, extra: str = "") -> str:
    classes = "flex items-center justify-center min-h-screen"
    if extra:
        classes = f"{classes} {extra}"
    return f'<div class="{classes}">{inner}</div>'


def _brand_header(subtitle: str) -> str:
    return (
        '<div class="flex flex-col gap-2">'
        '<h1 class="text-white text-2xl font-bold">cocompute</h1>'
        f'<p class="text-[#71717A] text-sm">{_text(subtitle)}</p>'
        "</div>"
    )


def _optional_error(error: Optional[str]) -> str:
    return error_banner(error) if error is not None else ""


def _submit_button(label: str) -> str:
    return f'<button type="submit" class="{_SUBMIT_CLASS}">{_text(label)}</button>'


def _hidden_token(token: str) -> str:
    return f'<input type="hidden" name="token" value="{_attr(token)}">'


def _now_like(sent_at: datetime) -> datetime:
    if sent_at.tzinfo is None:
        return datetime.now(timezone.utc).replace(tzinfo=None)
    return datetime.now(timezone.utc)


def is_link_expired(
    sent_at: Optional[datetime],
    lifetime: timedelta,
    now: Optional[datetime] = None,
) -> bool:
    """True when a link sent at ``sent_at`` is older than ``lifetime``.

    A link with no send time is always treated as expired.
    """
    if sent_at is None:
        return True
    if now is None:
        now = _now_like(sent_at)
    return now - sent_at > lifetime


# ── Sign-up ──────────────────────────────────────────────────────────


def _role_option(value: str, title: str, description: str, checked: bool = False) -> str:
    checked_attr = " checked" if checked else ""
    return (
        '<label class="flex items-center gap-3 rounded-lg bg-[#111118] border '
        "border-[#27272A] px-3.5 py-3 cursor-pointer has-[:checked]:border-indigo-500 "
        'has-[:checked]:border-2">'
        f'<input type="radio" name="role" value="{_attr(value)}" required'
        f'{checked_attr} class="peer sr-only">'
        '<span class="w-5 h-5 rounded-full bg-[#27272A] border border-[#3F3F46] flex '
        'items-center justify-center shrink-0 peer-checked:hidden"></span>'
        '<span class="w-5 h-5 rounded-full bg-indigo-500 hidden items-center '
        'justify-center shrink-0 peer-checked:flex">'
        '<span class="w-2 h-2 rounded-full bg-white"></span>'
        "</span>"
        '<div class="flex flex-col gap-0.5">'
        f'<span class="text-white text-sm font-medium">{_text(title)}</span>'
        f'<span class="text-[#52525B] text-xs">{_text(description)}</span>'
        "</div>"
        "</label>"
    )


def _captcha_widget(site_key: Optional[str]) -> str:
    if site_key is None:
        return ""
    return (
        f'<script src="{TURNSTILE_SCRIPT_URL}" async defer></script>'
        f'<div class="cf-turnstile" data-sitekey="{_attr(site_key)}" '
        'data-theme="dark"></div>'
    )


def _beta_invite(error: Optional[str], turnstile_site_key: Optional[str]) -> str:
    header = (
        '<div class="flex flex-col gap-2">'
        '<h1 class="text-white text-2xl font-bold">cocompute</h1>'
        '<p class="text-[#A1A1AA] text-base font-medium">Sign up</p>'
        '<p class="text-[#52525B] text-[13px]">'
        f"{_text(_SIGNUP_BLURB)}"
        "</p>"
        "</div>"
    )
    roles = (
        '<fieldset class="flex flex-col gap-2">'
        '<legend class="text-[#A1A1AA] text-[13px] font-medium mb-2">I want to...</legend>'
        + _role_option("consumer", "Use compute", "Run AI models on shared GPUs", checked=True)
        + _role_option("host", "Share my GPU", "Contribute idle compute to the pool")
        + _role_option("both", "Both", "Use and share compute")
        + "</fieldset>"
    )
    submit = (
        '<button type="submit" class="h-12 rounded-lg bg-indigo-500 text-white '
        "font-semibold text-[15px] flex items-center justify-center gap-2 "
        'hover:bg-indigo-600 transition cursor-pointer">'
        f'{icon("sparkles", "w-[18px] h-[18px]")}Sign up</button>'
    )
    footer = (
        '<div class="flex justify-center gap-1">'
        '<span class="text-[#52525B] text-[13px]">Already signed up?</span>'
        '<a href="/login" class="text-indigo-500 text-[13px] font-medium '
        'hover:underline">Sign in</a>'
        "</div>"
    )
    form = (
        f'<form method="POST" action="/beta" class="w-[480px] {_CARD_CLASS} px-9 py-10 '
        'flex flex-col gap-6">'
        + header
        + _optional_error(error)
        + text_input("Name", "text", "name", "Your name", required=True)
        + text_input("Email", "email", "email", "you@example.com", required=True)
        + roles
        + text_input(
            "What hardware do you have?",
            "text",
            "gpu",
            "e.g. RTX 3090, M2 Max, Radeon 7900...",
            hint="Optional — anything Ollama runs on works",
        )
        + _captcha_widget(turnstile_site_key)
        + '<hr class="border-[#27272A]">'
        + submit
        + footer
        + "</form>"
    )
    return render_page("cocompute — sign up", _centered(form, "py-12"))


def _beta_confirmation() -> str:
    card = (
        f'<div class="w-[440px] {_CARD_CLASS} px-10 pt-12 pb-10 flex flex-col gap-5 '
        'items-center text-center">'
        '<h1 class="text-white text-2xl font-bold">Check your email</h1>'
        '<p class="text-[#A1A1AA] text-sm leading-relaxed">'
        "We sent a verification link to your email. Click it to set your password "
        "and finish setting up your account."
        "</p>"
        '<p class="text-[#52525B] text-xs">'
        f"{_text(_SPAM_HINT)}"
        "</p>"
        '<div class="flex gap-3 mt-2">'
        f'<a href="/" class="{_LINK_CLASS}">Back to home</a>'
        '<span class="text-[#3F3F46] text-sm">·</span>'
        f'<a href="/login" class="{_LINK_CLASS}">Sign in</a>'
        "</div>"
        "</div>"
    )
    return render_page("cocompute — check your email", _centered(card))


def beta_page(
    error: Optional[str] = None,
    success: bool = False,
    turnstile_site_key: Optional[str] = None,
) -> str:
    """The sign-up form, or the "check your email" page once ``success`` is set."""
    if success:
        return _beta_confirmation()
    return _beta_invite(error, turnstile_site_key)


# ── Forgot password ──────────────────────────────────────────────────


def forgot_page(sent: bool = False) -> str:
    """The forgot-password form, with a confirmation notice once ``sent``."""
    notice = (
        f'<div class="{_SUCCESS_CLASS}">'
        "If that email exists, we sent a reset link. Check your inbox."
        "</div>"
        if sent
        else ""
    )
    form = (
        f'<form method="POST" action="/forgot" class="w-[400px] {_CARD_CLASS} px-10 '
        'pt-12 pb-10 flex flex-col gap-7">'
        + _brand_header("Enter your email and we'll send a reset link")
        + notice
        + text_input("Email", "email", "email", "you@example.com")
        + _submit_button("Send Reset Link")
        + '<div class="flex justify-center">'
        '<a href="/login" class="text-indigo-500 text-[13px] font-medium '
        'hover:underline">Back to login</a>'
        "</div>"
        "</form>"
    )
    return render_page("cocompute — forgot password", _centered(form))


# ── Sign-in ──────────────────────────────────────────────────────────


def login_page(error: Optional[str] = None) -> str:
    """The sign-in form, with an error banner when ``error`` is given."""
    links = (
        '<div class="flex flex-col items-center gap-2">'
        '<a href="/forgot" class="text-[#71717A] text-[13px] hover:text-white '
        'transition">Forgot password?</a>'
        '<div class="flex gap-1">'
        '<span class="text-[#71717A] text-[13px]">Want early access?</span>'
        '<a href="/beta" class="text-indigo-500 text-[13px] font-medium '
        'hover:underline">Request a beta invite →</a>'
        "</div>"
        "</div>"
    )
    form = (
        f'<form method="POST" action="/login" class="w-[400px] {_CARD_CLASS} px-10 '
        'pt-12 pb-10 flex flex-col gap-7">'
        + _brand_header("Sign in to your beta account")
        + _optional_error(error)
        + text_input("Email", "email", "email", "you@example.com")
        + text_input("Password", "password", "password", "••••••••")
        + _submit_button("Sign In")
        + links
        + "</form>"
    )
    return render_page("cocompute — sign in", _centered(form))


# ── Token links ──────────────────────────────────────────────────────


def _expired_page(message: str, href: str, link_text: str) -> str:
    card = (
        f'<div class="w-[400px] {_CARD_CLASS} px-10 pt-12 pb-10 flex flex-col gap-5 '
        'items-center text-center">'
        '<h1 class="text-white text-2xl font-bold">Link expired</h1>'
        f'<p class="text-[#71717A] text-sm">{_text(message)}</p>'
        f'<a href="{_attr(href)}" class="{_LINK_CLASS}">{_text(link_text)}</a>'
        "</div>"
    )
    return render_page("cocompute — link expired", _centered(card))


def _token_form(
    action: str,
    subtitle: str,
    token: str,
    error: Optional[str],
    password_label: str,
    submit_label: str,
) -> str:
    return (
        f'<form method="POST" action="{_attr(action)}" class="w-[400px] {_CARD_CLASS} '
        'px-10 pt-12 pb-10 flex flex-col gap-7">'
        + _brand_header(subtitle)
        + _optional_error(error)
        + _hidden_token(token)
        + text_input(password_label, "password", "password", "Choose a strong password")
        + _submit_button(submit_label)
        + "</form>"
    )


def reset_page(
    token: str,
    sent_at: Optional[datetime],
    error: Optional[str] = None,
    now: Optional[datetime] = None,
) -> str:
    """The new-password form for a reset link, or the expired page.

    ``sent_at`` is when the reset link for ``token`` was sent, or None when no
    account holds the token. Links are valid for one hour.
    """
    if is_link_expired(sent_at, RESET_LINK_LIFETIME, now):
        return _expired_page(
            "This reset link has expired or is invalid.", "/forgot", "Request a new one"
        )
    form = _token_form(
        "/reset", "Choose a new password", token, error, "New Password", "Reset Password"
    )
    return render_page("cocompute — reset password", _centered(form))


def verify_page(
    token: str,
    sent_at: Optional[datetime],
    error: Optional[str] = None,
    now: Optional[datetime] = None,
) -> str:
    """The set-password form for a verification link, or the expired page.

    ``sent_at`` is when the verification e-mail for ``token`` was sent, or None
    when no account holds the token. Links are valid for 48 hours.
    """
    if is_link_expired(sent_at, VERIFY_LINK_LIFETIME, now):
        return _expired_page(
            "This verification link has expired or is invalid. "
            "Please contact us for a new invite.",
            "/login",
            "Back to login",
        )
    form = _token_form(
        "/verify",
        "Set your password to activate your account",
        token,
        error,
        "Password",
        "Activate Account",
    )
    return render_page("cocompute — set password", _centered(form))