"""Integration tests for the mhcms CLI commands"""

import json

import pytest
from typer.testing import CliRunner

from mhcms.cli.cli import app


ARTICLE = """\
Title: CLI Test
Tags: a, b
Series: demo
---

Intro with [kbd Ctrl] key.

# First

```{json @parse id=1}
{"x": [1, 2]}
```

## Nested

> Quoted
> - Someone

# Second

Body.
"""


@pytest.fixture(name="runner")
def runner_fixture():
    return CliRunner()


@pytest.fixture(name="article_path")
def article_path_fixture(tmp_path):
    path = tmp_path / "cli-test.md"
    path.write_text(ARTICLE, encoding="utf-8")
    return path


def test_parse_prints_json(runner, article_path):
    """parse prints headers and the section tree as JSON."""
    result = runner.invoke(app, ["parse", str(article_path), "--date", "2024-05-01"])
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["headers"]["title"] == "CLI Test"
    assert data["headers"]["shortTitle"] == "cli-test"
    assert data["headers"]["date"] == "2024-05-01T00:00:00"
    assert data["headers"]["customHeaders"] == {"series": "demo"}
    assert [s["heading"] for s in data["contents"]["sections"]] == [None, "First", "Second"]
    first = data["contents"]["sections"][1]
    assert first["sections"][0]["paragraphs"][0] == {"type": "object", "content": {"x": [1, 2]}, "options": {"id": 1}}


def test_parse_respects_object_languages(runner, article_path, monkeypatch):
    """Disabling the json decoder through config leaves json blocks as code."""
    monkeypatch.setenv("MHCMS_OBJECT_LANGUAGES", "yaml")
    result = runner.invoke(app, ["parse", str(article_path), "--indent", "0"])
    assert result.exit_code == 0, result.output
    first = json.loads(result.output)["contents"]["sections"][1]
    assert first["sections"][0]["paragraphs"][0]["type"] == "code-block"


def test_parse_unknown_object_language(runner, article_path, monkeypatch):
    """An unknown object language in config exits 1 before parsing."""
    monkeypatch.setenv("MHCMS_OBJECT_LANGUAGES", "yaml,toml")
    result = runner.invoke(app, ["parse", str(article_path)])
    assert result.exit_code == 1
    assert "toml" in result.output


def test_parse_short_title_option(runner, article_path):
    """--short-title replaces the file stem."""
    result = runner.invoke(app, ["parse", str(article_path), "--short-title", "Custom"])
    assert json.loads(result.output)["headers"]["shortTitle"] == "Custom"


def test_parse_invalid_article(runner, tmp_path):
    """A document without separator exits 1 with an error message."""
    path = tmp_path / "bad.md"
    path.write_text("Title: no body\n", encoding="utf-8")
    result = runner.invoke(app, ["parse", str(path)])
    assert result.exit_code == 1
    assert "Error: Unable to separate headers and contents" in result.output


def test_parse_missing_file(runner, tmp_path):
    """A missing file exits 1."""
    result = runner.invoke(app, ["parse", str(tmp_path / "missing.md")])
    assert result.exit_code == 1
    assert "Unable to read" in result.output


def test_parse_invalid_date(runner, article_path):
    """A malformed --date exits 1."""
    result = runner.invoke(app, ["parse", str(article_path), "--date", "May 1st"])
    assert result.exit_code == 1
    assert "Invalid --date" in result.output


def test_outline(runner, article_path):
    """outline prints headings indented by level."""
    result = runner.invoke(app, ["outline", str(article_path)])
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["First", "  Nested", "Second"]


def test_outline_max_depth(runner, article_path):
    """--max-depth 1 lists only top-level headings."""
    result = runner.invoke(app, ["outline", str(article_path), "--max-depth", "1"])
    assert result.output.splitlines() == ["First", "Second"]


def test_render(runner, article_path):
    """render expands tag shorthands in text and quote paragraphs."""
    result = runner.invoke(app, ["render", str(article_path)])
    assert result.exit_code == 0, result.output
    assert "Intro with <kbd>Ctrl</kbd> key." in result.output
    assert "Quoted" in result.output
