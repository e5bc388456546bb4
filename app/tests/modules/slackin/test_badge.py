"""Tests for modules.slackin.badge."""

from modules.slackin import badge
from modules.slackin.models import UsersOnline


def test_text_width():
    assert badge.text_width("") == badge.PADDING
    assert badge.text_width("slack") == 5 * badge.CHAR_WIDTH + badge.PADDING


def test_render_badge_is_svg():
    svg = badge.render_badge("3/42").decode("utf-8")
    assert svg.startswith("<svg")
    assert 'aria-label="slack: 3/42"' in svg
    assert badge.VALUE_COLOR in svg


def test_render_badge_width_matches_segments():
    svg = badge.render_badge("3/42").decode("utf-8")
    width = badge.text_width("slack") + badge.text_width("3/42")
    assert f'width="{width}"' in svg


def test_render_badge_escapes_text():
    svg = badge.render_badge("<b>", label="a&b").decode("utf-8")
    assert "&lt;b&gt;" in svg
    assert "a&amp;b" in svg
    assert "<b>" not in svg


def test_render_users_badge():
    svg = badge.render_users_badge(UsersOnline(total=42, active=3)).decode("utf-8")
    assert ">3/42</text>" in svg


def test_render_users_badge_unavailable():
    svg = badge.render_users_badge(None).decode("utf-8")
    assert f">{badge.UNAVAILABLE_VALUE}</text>" in svg
    assert badge.UNAVAILABLE_COLOR in svg
