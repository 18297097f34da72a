from datetime import datetime, timedelta, timezone

import pytest

from cocompute.account import (
    RESET_LINK_LIFETIME,
    VERIFY_LINK_LIFETIME,
    beta_page,
    forgot_page,
    is_link_expired,
    login_page,
    reset_page,
    verify_page,
)

NOW = datetime(2026, 1, 10, 12, 0, tzinfo=timezone.utc)


# ── is_link_expired ──────────────────────────────────────────────────


def test_missing_send_time_is_expired():
    assert is_link_expired(None, timedelta(hours=1), NOW) is True


def test_fresh_link_is_not_expired():
    assert is_link_expired(NOW - timedelta(minutes=5), timedelta(hours=1), NOW) is False


def test_old_link_is_expired():
    assert is_link_expired(NOW - timedelta(hours=2), timedelta(hours=1), NOW) is True


def test_exact_lifetime_is_not_expired():
    lifetime = timedelta(hours=1)
    assert is_link_expired(NOW - lifetime, lifetime, NOW) is False


def test_default_now_with_naive_timestamp():
    recent = datetime.now(timezone.utc).replace(tzinfo=None)
    assert is_link_expired(recent, timedelta(hours=1)) is False


def test_default_now_with_aware_timestamp():
    old = datetime.now(timezone.utc) - timedelta(days=3)
    assert is_link_expired(old, timedelta(hours=1)) is True


def test_lifetimes_bound_expiry():
    assert is_link_expired(NOW - timedelta(minutes=59), RESET_LINK_LIFETIME, NOW) is False
    assert is_link_expired(NOW - timedelta(minutes=61), RESET_LINK_LIFETIME, NOW) is True
    assert is_link_expired(NOW - timedelta(hours=47), VERIFY_LINK_LIFETIME, NOW) is False
    assert is_link_expired(NOW - timedelta(hours=49), VERIFY_LINK_LIFETIME, NOW) is True


# ── beta ─────────────────────────────────────────────────────────────


def test_beta_success_shows_confirmation():
    page = beta_page(success=True)
    assert "<title>cocompute — check your email</title>" in page
    assert "Check your email" in page
    assert 'action="/beta"' not in page


def test_beta_form_defaults():
    page = beta_page()
    assert "<title>cocompute — sign up</title>" in page
    assert 'action="/beta"' in page
    for role in ("consumer", "host", "both"):
        assert f'name="role" value="{role}"' in page
    assert 'value="consumer" required checked' in page
    assert 'value="host" required checked' not in page
    assert "cf-turnstile" not in page


def test_beta_form_with_captcha_key():
    page = beta_page(turnstile_site_key="placeholder")
    assert 'data-sitekey="placeholder"' in page
    assert "challenges.cloudflare.com/turnstile/v0/api.js" in page


def test_beta_error_is_escaped():
    page = beta_page(error="<b>bad</b>")
    assert "&lt;b&gt;bad&lt;/b&gt;" in page
    assert "<b>bad</b>" not in page


# ── forgot ───────────────────────────────────────────────────────────


def test_forgot_page_sent_notice():
    notice = "If that email exists, we sent a reset link. Check your inbox."
    assert notice in forgot_page(sent=True)
    assert notice not in forgot_page(sent=False)
    assert 'action="/forgot"' in forgot_page()


# ── login ────────────────────────────────────────────────────────────


def test_login_page_without_error():
    page = login_page()
    assert "<title>cocompute — sign in</title>" in page
    assert 'action="/login"' in page
    assert "bg-red-500/10" not in page


def test_login_page_with_error():
    page = login_page(error="Invalid email or password")
    assert "Invalid email or password" in page
    assert "bg-red-500/10" in page


# ── reset ────────────────────────────────────────────────────────────


def test_reset_page_valid_token():
    page = reset_page("token", NOW - timedelta(minutes=30), now=NOW)
    assert "<title>cocompute — reset password</title>" in page
    assert '<input type="hidden" name="token" value="token">' in page
    assert "Reset Password" in page


def test_reset_page_expired_token():
    page = reset_page("token", NOW - timedelta(hours=2), now=NOW)
    assert "<title>cocompute — link expired</title>" in page
    assert "This reset link has expired or is invalid." in page
    assert 'href="/forgot"' in page
    assert 'name="token"' not in page


def test_reset_page_unknown_token():
    page = reset_page("token", None, now=NOW)
    assert "This reset link has expired or is invalid." in page


def test_reset_page_escapes_token_and_error():
    page = reset_page('a"b', NOW, error="<x>", now=NOW)
    assert 'value="a&quot;b"' in page
    assert "&lt;x&gt;" in page


# ── verify ───────────────────────────────────────────────────────────


@pytest.mark.parametrize("age", [timedelta(hours=1), timedelta(hours=47)])
def test_verify_page_valid_token(age):
    page = verify_page("token", NOW - age, now=NOW)
    assert "<title>cocompute — set password</title>" in page
    assert "Activate Account" in page
    assert 'action="/verify"' in page


def test_verify_page_expired_token():
    page = verify_page("token", NOW - timedelta(hours=49), now=NOW)
    assert "<title>cocompute — link expired</title>" in page
    assert "Please contact us for a new invite." in page
    assert 'href="/login"' in page


def test_verify_page_unknown_token_and_error():
    assert "Link expired" in verify_page("token", None, now=NOW)
    page = verify_page("token", NOW, error="Password too short", now=NOW)
    assert "Password too short" in page