"""Tests for the extract-url and extract-html commands."""

import argparse
import json
from unittest.mock import Mock, patch

import pytest

from newsmeta.cli.commands.extract_html import (
    add_extract_html_parser,
    handle_extract_html_command,
)
from newsmeta.cli.commands.extract_url import (
    add_extract_url_parser,
    handle_extract_url_command,
)
from newsmeta.crawler import FetchError
from newsmeta.models import Article


def _parse(add_parser, argv):
    parser = argparse.ArgumentParser()
    subparsers = parser.add_subparsers()
    add_parser(subparsers)
    return parser.parse_args(argv)


class TestExtractUrlParser:
    def test_add_extract_url_parser_creates_subcommand(self):
        """Verify extract-url subparser is created with correct arguments."""
        args = _parse(add_extract_url_parser, ["extract-url", "https://example.com/article"])

        assert args.url == "https://example.com/article"
        assert args.timeout is None
        assert args.indent == 2
        assert args.func is handle_extract_url_command

    def test_timeout_and_indent(self):
        args = _parse(
            add_extract_url_parser,
            ["extract-url", "https://example.com/a", "--timeout", "5", "--indent", "4"],
        )

        assert args.timeout == 5.0
        assert args.indent == 4


class TestHandleExtractUrl:
    def test_prints_article_json(self, capsys):
        article = Article(
            title="Big Story",
            url="https://www.example.com/a",
            authors=("Jane Doe",),
            raw_html="<html>",
        )
        args = argparse.Namespace(url="https://example.com/a", timeout=3.0, indent=2)

        with patch("newsmeta.crawler.ArticleParser.parse", return_value=article) as parse:
            result = handle_extract_url_command(args)

        assert result == 0
        parse.assert_called_once_with("https://example.com/a")
        output = json.loads(capsys.readouterr().out)
        assert output["title"] == "Big Story"
        assert output["url"] == "https://www.example.com/a"
        assert output["authors"] == ["Jane Doe"]
        assert output["full_text"] == ""

    def test_fetch_error_returns_nonzero(self, capsys, caplog):
        args = argparse.Namespace(url="https://example.com/a", timeout=None, indent=2)
        error = FetchError(
            "HTTP error fetching https://example.com/a: status code 500",
            "https://example.com/a",
            500,
        )

        with patch("newsmeta.crawler.ArticleParser.parse", side_effect=error):
            result = handle_extract_url_command(args)

        assert result == 1
        assert capsys.readouterr().out == ""
        assert "Could not fetch https://example.com/a" in caplog.text

    @pytest.mark.parametrize("url", ["", "not-a-url", "example.com/path"])
    def test_invalid_url_rejected(self, url):
        args = argparse.Namespace(url=url, timeout=None, indent=2)

        with patch("newsmeta.crawler.NewsFetcher") as fetcher_cls:
            assert handle_extract_url_command(args) == 1

        fetcher_cls.assert_not_called()

    def test_timeout_is_passed_to_fetcher(self):
        args = argparse.Namespace(url="https://example.com/a", timeout=9.0, indent=2)
        fetcher = Mock()
        fetcher.fetch.side_effect = FetchError("down", "https://example.com/a")

        with patch("newsmeta.crawler.NewsFetcher", return_value=fetcher) as fetcher_cls:
            handle_extract_url_command(args)

        fetcher_cls.assert_called_once_with(timeout=9.0)


class TestExtractHtml:
    def test_parser_requires_url(self):
        with pytest.raises(SystemExit):
            _parse(add_extract_html_parser, ["extract-html", "page.html"])

    def test_extracts_saved_page(self, tmp_path, capsys, full_article_html):
        page = tmp_path / "page.html"
        page.write_text(full_article_html, encoding="utf-8")
        args = _parse(
            add_extract_html_parser,
            [
                "extract-html",
                str(page),
                "--url",
                "https://example.com/story",
                "--final-url",
                "https://www.example.com/news/story",
            ],
        )

        result = args.func(args)

        assert result == 0
        output = json.loads(capsys.readouterr().out)
        assert output["title"] == "The PM's Comeback"
        assert output["url"] == "https://www.example.com/news/story"
        assert output["keywords"] == ["politics", "PM", "comeback"]
        assert len(output["raw_html"]) <= 100

    def test_missing_file(self, tmp_path, capsys):
        args = argparse.Namespace(
            path=str(tmp_path / "missing.html"),
            url="https://example.com/a",
            final_url=None,
            indent=2,
        )

        assert handle_extract_html_command(args) == 1
        assert capsys.readouterr().out == ""
