"""Tests for explode.cli module."""

import json

import pytest
import yaml

from explode.cli import main, load_expressions, format_error
from explode.errors import ExplodeError


def _run(capsys, *argv):
    rc = main(list(argv))
    out, err = capsys.readouterr()
    return rc, out, err


class TestExpand:
    """Default line output."""

    def test_single_expression(self, capsys):
        rc, out, err = _run(capsys, "fi{nd,ne,sh}")
        assert rc == 0
        assert out == "find\nfine\nfish\n"
        assert err == ""

    def test_multiple_expressions(self, capsys):
        rc, out, _ = _run(capsys, "r{u,a}{,i}n", "x")
        assert out.splitlines() == ["run", "ruin", "ran", "rain", "x"]

    def test_limit(self, capsys):
        rc, out, _ = _run(capsys, "--limit", "2", "{a,b,c}")
        assert out == "a\nb\n"

    def test_negative_limit(self, capsys):
        with pytest.raises(SystemExit):
            main(["--limit", "-1", "a"])

    def test_no_expressions(self, capsys):
        rc, out, err = _run(capsys)
        assert rc == 0
        assert out == ""
        assert "usage" in err


class TestErrors:
    """Diagnostics go to stderr with a caret under the error."""

    def test_error_marker(self, capsys):
        rc, out, err = _run(capsys, "a{b", "x{y,z}")
        assert rc == 0
        assert out == "xy\nxz\n"
        assert err == "a{b\n ^ no matching '}' found\n"

    def test_error_at_start(self, capsys):
        rc, out, err = _run(capsys, ",")
        assert out == ""
        assert err == ",\n^ invalid separator\n"

    def test_recover_reports_every_error(self, capsys):
        rc, out, err = _run(capsys, "--recover", ",{a,b},")
        assert rc == 0
        assert out == ",a,\n,b,\n"
        assert err == ",{a,b},\n^ invalid separator\n      ^ invalid separator\n"

    def test_recover_with_limit(self, capsys):
        rc, out, err = _run(capsys, "--recover", "--limit", "2", "{a,b}{c,d},")
        assert out == "ac,\nad,\n"
        assert err == "{a,b}{c,d},\n          ^ invalid separator\n"

    def test_recover_without_errors_is_quiet(self, capsys):
        rc, out, err = _run(capsys, "--recover", "{a,b}")
        assert out == "a\nb\n"
        assert err == ""

    def test_format_error(self):
        assert format_error(ExplodeError(3, "}")) == "   ^ no matching '}' found"
        assert format_error(ExplodeError(0, None, "incomplete escape")) == "^ incomplete escape"


class TestCount:
    """--count prints sizes."""

    def test_count(self, capsys):
        rc, out, _ = _run(capsys, "--count", "{a,b}{c,d}", "x")
        assert out == "4\n1\n"

    def test_count_error(self, capsys):
        rc, out, err = _run(capsys, "--count", "{a")
        assert out == ""
        assert "no matching '}' found" in err

    def test_count_recover(self, capsys):
        rc, out, _ = _run(capsys, "--count", "--recover", "{a,b},")
        assert out == "2\n"


class TestFormats:
    """json and yaml output."""

    def test_json(self, capsys):
        rc, out, _ = _run(capsys, "--format", "json", "{a,b}", "c{d}")
        assert json.loads(out) == {"{a,b}": ["a", "b"], "c{d}": ["cd"]}

    def test_yaml(self, capsys):
        rc, out, _ = _run(capsys, "--format", "yaml", "{a,b}", "c{d}")
        assert yaml.safe_load(out) == {"{a,b}": ["a", "b"], "c{d}": ["cd"]}

    def test_json_count(self, capsys):
        rc, out, _ = _run(capsys, "--format", "json", "--count", "{a,b}{c,d,e}")
        assert json.loads(out) == {"{a,b}{c,d,e}": 6}

    def test_json_skips_failed(self, capsys):
        rc, out, err = _run(capsys, "--format", "json", "{a", "b")
        assert json.loads(out) == {"b": ["b"]}
        assert "{a" in err


class TestFiles:
    """--file input."""

    def test_text_file(self, tmp_path, capsys):
        p = tmp_path / "exprs.txt"
        p.write_text("{a,b}\n\nc{d,e}\n", encoding="utf-8")
        rc, out, _ = _run(capsys, "--file", str(p))
        assert out == "a\nb\ncd\nce\n"

    def test_yaml_file(self, tmp_path, capsys):
        p = tmp_path / "exprs.yaml"
        p.write_text("- 'fi{nd,sh}'\n- 'x'\n", encoding="utf-8")
        rc, out, _ = _run(capsys, "--file", str(p))
        assert out == "find\nfish\nx\n"

    def test_arguments_before_file(self, tmp_path, capsys):
        p = tmp_path / "exprs.txt"
        p.write_text("second\n", encoding="utf-8")
        rc, out, _ = _run(capsys, "--file", str(p), "first")
        assert out == "first\nsecond\n"

    def test_load_expressions_empty_yaml(self, tmp_path):
        p = tmp_path / "empty.yml"
        p.write_text("", encoding="utf-8")
        assert load_expressions(p) == []

    def test_yaml_not_a_list(self, tmp_path):
        p = tmp_path / "bad.yaml"
        p.write_text("a: b\n", encoding="utf-8")
        with pytest.raises(ValueError, match="YAML list"):
            load_expressions(p)

    def test_yaml_unquoted_braces_rejected(self, tmp_path):
        """Unquoted {a,b} is a YAML mapping, not an expression."""
        p = tmp_path / "exprs.yaml"
        p.write_text("- {a,b}\n- x{1,2}\n", encoding="utf-8")
        with pytest.raises(ValueError, match="item 0 is not a string"):
            load_expressions(p)

    def test_yaml_non_string_item_is_usage_error(self, tmp_path, capsys):
        p = tmp_path / "exprs.yaml"
        p.write_text("- 'x{1,2}'\n- 42\n", encoding="utf-8")
        with pytest.raises(SystemExit):
            main(["--file", str(p)])
        out, err = capsys.readouterr()
        assert out == ""
        assert "item 1 is not a string" in err

    def test_missing_file(self, tmp_path):
        with pytest.raises(SystemExit):
            main(["--file", str(tmp_path / "nope.txt")])


class TestTokens:
    """--tokens debug view."""

    def test_tokens(self, capsys):
        rc, out, _ = _run(capsys, "--tokens", "a{b,c}")
        lines = out.splitlines()
        assert lines[0].startswith("LIT")
        assert "'a'" in lines[0]
        assert lines[1].split() == ["OPEN", "1"]
        assert lines[3].split() == ["SEP", "3"]
        assert lines[-1].split() == ["CLOSE", "5"]

    def test_tokens_ignore_format(self, capsys):
        rc, out, _ = _run(capsys, "--tokens", "--format", "json", "a{b}")
        assert out.splitlines()[-1].split() == ["CLOSE", "3"]
        assert "{}" not in out

    def test_tokens_error(self, capsys):
        rc, out, err = _run(capsys, "--tokens", "a\\q")
        assert "invalid escape sequence" in err


class TestSelftest:
    def test_selftest(self, capsys):
        rc, out, _ = _run(capsys, "--selftest")
        assert rc == 0
        assert "selftest: OK" in out
