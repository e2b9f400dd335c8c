"""Tests for gop.output.console module."""

from __future__ import annotations

import pytest

from gop.output.console import ConsoleProtocol, MockConsole, RichConsole, Style


class TestMockConsole:
    def test_print_captures_message(self) -> None:
        console = MockConsole()
        console.print("hello")
        assert console.outputs[0].message == "hello"
        assert console.outputs[0].style == Style.DEFAULT

    def test_warning_and_error_are_stderr_lines(self) -> None:
        console = MockConsole()
        console.print("progress")
        console.warning("Packaging repo without license")
        console.error("boom")

        assert "progress" not in console.stderr_text
        assert "warning: Packaging repo without license" in console.stderr_text
        assert "error: boom" in console.stderr_text
        assert console.has_warning()
        assert console.has_error()

    def test_find(self) -> None:
        console = MockConsole()
        console.success("Release deleted")
        console.header("Releasing:")
        assert len(console.find("Release")) == 1
        assert console.messages == ["OK Release deleted", "Releasing:"]

    def test_satisfies_protocol(self) -> None:
        console: ConsoleProtocol = MockConsole()
        console.info("x")


class TestRichConsole:
    def test_warnings_go_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = RichConsole()
        console.print("to stdout")
        console.warning("to stderr")

        captured = capsys.readouterr()
        assert "to stdout" in captured.out
        assert "to stderr" in captured.err
        assert "to stderr" not in captured.out

    def test_print_does_not_interpret_markup(self, capsys: pytest.CaptureFixture[str]) -> None:
        RichConsole().print("[bold]literal[/bold]")
        assert "[bold]literal[/bold]" in capsys.readouterr().out

    def test_error_text_with_brackets_is_printed_verbatim(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        console = RichConsole()
        console.error("gh: unexpected [/x] in response")
        console.warning("path [bold]dist[/bold]")
        console.header("[Releasing]")

        captured = capsys.readouterr()
        assert "gh: unexpected [/x] in response" in captured.err
        assert "path [bold]dist[/bold]" in captured.err
        assert "[Releasing]" in captured.out
