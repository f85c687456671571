"""Unit tests for core/text_block.py"""

import logging
from datetime import datetime

import pytest

from mhcms.core.text_block import parse_text_block


def test_builtin_year():
    """[!year] expands to the current year."""
    assert parse_text_block("(c) [!year]") == f"(c) {datetime.now().year}"


def test_custom_command_with_args():
    """Commands receive whitespace-split arguments."""
    commands = {"greet": lambda args: "Hello " + " ".join(args)}
    assert parse_text_block("[!greet big world]!", commands) == "Hello big world!"


def test_custom_command_overrides_builtin():
    """Caller commands take precedence over built-ins."""
    assert parse_text_block("[!year]", {"year": lambda args: "MMXXIV"}) == "MMXXIV"


def test_unknown_command_left_untouched(caplog):
    """Unknown commands stay as written and are logged."""
    with caplog.at_level(logging.WARNING, logger="mhcms.core.text_block"):
        assert parse_text_block("a [!nope x] b") == "a [!nope x] b"
    assert "nope" in caplog.text


@pytest.mark.parametrize("text,expected", [
    ("Press [kbd Ctrl] now", "Press <kbd>Ctrl</kbd> now"),
    ("[abbr HTML] and [em very much]", "<abbr>HTML</abbr> and <em>very much</em>"),
    ("line[br]break", "line<br></br>break"),
])
def test_whitelisted_tags(text, expected):
    """[tag content] becomes an HTML element for whitelisted tags."""
    assert parse_text_block(text) == expected


@pytest.mark.parametrize("text", [
    "[kbd](http://example.org)",
    "see [the docs](docs.md)",
    "![b image](pic.png)",
    "[b label][ref]",
])
def test_links_and_images_untouched(text):
    """Markdown links and images are never rewritten."""
    assert parse_text_block(text) == text


def test_non_whitelisted_tag(caplog):
    """Tags outside the whitelist stay as written and are logged."""
    with caplog.at_level(logging.WARNING, logger="mhcms.core.text_block"):
        assert parse_text_block("[script alert]") == "[script alert]"
    assert "script" in caplog.text


def test_custom_whitelist():
    """A caller whitelist replaces the default one."""
    assert parse_text_block("[kbd x] [aside y]", tag_whitelist=["aside"]) == "[kbd x] <aside>y</aside>"


def test_plain_text_unchanged():
    """Text without brackets passes through."""
    assert parse_text_block("nothing to do here") == "nothing to do here"
