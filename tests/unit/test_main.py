"""Unit tests for the form-rules command line."""

import pytest

from form_rules.main import main

pytestmark = pytest.mark.cli


class TestCheck:
    def test_true_verdict_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["check", "email", "user@example.com"]) == 0
        assert capsys.readouterr().out == "true\n"

    def test_false_verdict_exits_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["check", "digit", "12a45"]) == 1
        assert capsys.readouterr().out == "false\n"

    def test_bound_rule(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["check", "min-length", "Jane", "3"]) == 0
        assert main(["check", "max-length", "Jane", "3"]) == 1
        assert capsys.readouterr().out == "true\nfalse\n"

    def test_non_integer_bound_is_usage_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["check", "min-length", "Jane", "three"]) == 2
        assert "must be an int" in capsys.readouterr().err

    def test_missing_bound_is_usage_error(self) -> None:
        assert main(["check", "max-length", "Jane"]) == 2

    def test_extra_argument_is_usage_error(self) -> None:
        assert main(["check", "digit", "1", "2"]) == 2

    def test_is_json_null(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["check", "is-json", "null"]) == 0

    def test_unknown_rule_rejected_by_argparse(self) -> None:
        with pytest.raises(SystemExit) as exc:
            main(["check", "palindrome", "abba"])
        assert exc.value.code == 2


class TestEscape:
    def test_escape_prints_entities(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["escape", "<script>alert('x')</script>"]) == 0
        out = capsys.readouterr().out
        assert out == "&lt;script&gt;alert(&#x27;x&#x27;)&lt;/script&gt;\n"


def test_debug_logging_keeps_stdout_clean(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--log-level", "DEBUG", "--log-format", "json", "check", "url", "www.example.com"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "true\n"
    assert "rule_checked" in captured.err
