"""
Tests for the wdquery CLI.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

import json

import pytest
from click.testing import CliRunner

from webdriver_query import __version__
from webdriver_query.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


def test_css_map(runner) -> None:
    result = runner.invoke(cli, ["css", '{:tag :div, :id "content"}'])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "div[id='content']"


def test_css_ancestry(runner) -> None:
    result = runner.invoke(
        cli, ["css", '[{:tag :div, :id "content"} {:tag :a, :class "external"}]']
    )
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "div[id='content'] a[class='external']"


def test_xpath_scope(runner) -> None:
    result = runner.invoke(cli, ["xpath", "--scope", "local", "{:tag :a}"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == ".//a"


def test_xpath_text(runner) -> None:
    result = runner.invoke(cli, ["xpath", '{:tag :a :text "Click"}'])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == '//a[text()="Click"]'


def test_regex_query_fails(runner) -> None:
    result = runner.invoke(cli, ["css", '{:tag :a :class #"^ext"}'])
    assert result.exit_code == 1
    assert "regex" in result.output


def test_css_text_fails(runner) -> None:
    result = runner.invoke(cli, ["css", '{:tag :a :text "Click"}'])
    assert result.exit_code == 1
    assert "text of an element" in result.output


def test_meta_tag_in_xpath_ancestry_fails(runner) -> None:
    result = runner.invoke(cli, ["xpath", "[{:tag :form} {:tag :radio}]"])
    assert result.exit_code == 1
    assert "meta" in result.output


def test_parse_error_is_usage_error(runner) -> None:
    result = runner.invoke(cli, ["css", "{:tag :div"])
    assert result.exit_code == 2
    assert "QUERY" in result.output


def test_inspect_json(runner) -> None:
    result = runner.invoke(
        cli, ["inspect", "--format", "json", '{:tag :a, :class #"^ext", :index 1}']
    )
    assert result.exit_code == 0, result.output
    report = json.loads(result.output)
    assert report["kind"] == "query"
    assert report["contains_regex"] is True
    assert report["all_regex"] is False
    assert report["strategy"] == "filtered"
    assert report["selector"] == "a"
    assert report["patterns"] == [{"attribute": "class", "pattern": "^ext"}]
    assert report["index"] == 1


def test_inspect_text_ancestry_with_regex(runner) -> None:
    result = runner.invoke(cli, ["inspect", '[{:tag :div} {:tag :a :href #"x"}]'])
    assert result.exit_code == 0, result.output
    assert "Kind: ancestry (2 level(s))" in result.output
    assert "Contains regex: yes" in result.output
    assert "Strategy: none" in result.output


def test_inspect_text_structural(runner) -> None:
    result = runner.invoke(cli, ["inspect", "-l", "xpath", '{:tag :div :id "c"}'])
    assert result.exit_code == 0, result.output
    assert "Strategy: structural" in result.output
    assert "Selector (xpath): //div[@id='c']" in result.output


def test_config_default_scope(runner, tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"compiler": {"default_scope": "local"}}), encoding="utf-8")
    result = runner.invoke(cli, ["--config", str(path), "xpath", "{:tag :a}"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == ".//a"


def test_bad_config(runner, tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{broken", encoding="utf-8")
    result = runner.invoke(cli, ["--config", str(path), "css", "{:tag :a}"])
    assert result.exit_code == 1
    assert "Invalid JSON" in result.output


def test_version(runner) -> None:
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output
