"""Tests for the command-line driver."""

from __future__ import annotations

import logging

import pytest

from rdfwriter.main import create_parser, main

from .conftest import EX, parse_document, rdf

VALID = """
@prefix ex: <http://ex.org#> .
ex:a a ex:Thing ; ex:name "A" .
"""

UNTYPED = """
@prefix ex: <http://ex.org#> .
ex:a ex:name "A" .
"""


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def valid_file(tmp_path):
    path = tmp_path / "valid.ttl"
    path.write_text(VALID, encoding="utf-8")
    return path


@pytest.fixture
def untyped_file(tmp_path):
    path = tmp_path / "untyped.ttl"
    path.write_text(UNTYPED, encoding="utf-8")
    return path


def test_writes_output_file(valid_file, tmp_path) -> None:
    output = tmp_path / "out" / "valid.rdf"

    assert main([str(valid_file), "--output", str(output), "--tab", "  "]) == 0

    root = parse_document(output.read_text(encoding="utf-8"))
    assert root[0].get(rdf("about")) == EX + "a"
    assert '\n  <ex:Thing rdf:about="http://ex.org#a">' in output.read_text(encoding="utf-8")


def test_prints_to_stdout(valid_file, capsys) -> None:
    assert main([str(valid_file)]) == 0

    out = capsys.readouterr().out
    assert parse_document(out)[0][0].text.strip() == "A"


def test_serialization_error_exit_code(untyped_file, capsys) -> None:
    assert main([str(untyped_file)]) == 2

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "rdf:type" in captured.err


def test_check_mode(valid_file, untyped_file, capsys) -> None:
    assert main([str(valid_file), "--check"]) == 0
    assert "Validation VALID" in capsys.readouterr().err

    assert main([str(untyped_file), "--check"]) == 2
    assert "Validation INVALID" in capsys.readouterr().err


def test_stats(valid_file, capsys) -> None:
    assert main([str(valid_file), "--stats", "--check"]) == 0

    assert "total_triples: 2" in capsys.readouterr().err


def test_unreadable_input(tmp_path, capsys) -> None:
    assert main([str(tmp_path / "missing.ttl")]) == 1

    assert "Could not read" in capsys.readouterr().err


def test_parser_defaults() -> None:
    args = create_parser().parse_args(["data.ttl"])

    assert args.input == "data.ttl"
    assert args.output is None
    assert args.tab is None
    assert not args.check
