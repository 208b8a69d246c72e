"""
Tests for the text renderer and the terminal color probe
"""

import io

import click
import pytest

from user_error import StructuredError, set_config, RenderConfig
from user_error.cli.renderers import TextRenderer
from user_error.cli.terminal import resolve_color, supports_color


class FakeTTY(io.StringIO):
    def isatty(self):
        return True


def styled_scenario():
    return (
        StructuredError.new("Failed to build project")
        .reason("Database could not be parsed")
        .help("Try: touch main.db")
    )


class TestTextRenderer:

    def test_plain_lines(self):
        lines = TextRenderer(color=False).render_lines(styled_scenario())
        assert lines == [
            "Error: Failed to build project",
            " - Database could not be parsed",
            "Try: touch main.db",
        ]

    def test_colored_output(self):
        rendered = TextRenderer(color=True).render(styled_scenario())
        expected = (
            click.style("Error:", fg="white", bg="red", bold=True)
            + " "
            + click.style("Failed to build project", fg="red", bold=True)
            + "\n "
            + click.style("-", fg="yellow")
            + " Database could not be parsed\n"
            + click.style("Try: touch main.db", fg="white", dim=True)
            + "\n"
        )
        assert rendered == expected

    def test_color_stripped_equals_plain(self):
        err = styled_scenario()
        colored = TextRenderer(color=True).render(err)
        assert click.unstyle(colored) == TextRenderer(color=False).render(err)

    def test_reason_text_not_recolored(self):
        rendered = TextRenderer(color=True).render(StructuredError.new("s").reason("plain reason"))
        assert rendered.endswith(" plain reason\n")

    def test_no_reasons_no_help(self):
        assert TextRenderer(color=True).render_lines(StructuredError.new("s")) == [
            click.style("Error:", fg="white", bg="red", bold=True) + " " + click.style("s", fg="red", bold=True)
        ]


class TestColorProbe:

    def test_tty_supports_color(self):
        assert supports_color(FakeTTY(), environ={}) is True

    def test_plain_stream(self):
        assert supports_color(io.StringIO(), environ={}) is False

    def test_no_color_wins(self):
        assert supports_color(FakeTTY(), environ={"NO_COLOR": ""}) is False

    def test_dumb_terminal(self):
        assert supports_color(FakeTTY(), environ={"TERM": "dumb"}) is False

    def test_force_color(self):
        assert supports_color(io.StringIO(), environ={"FORCE_COLOR": "1"}) is True

    def test_stream_without_isatty(self):
        assert supports_color(object(), environ={}) is False

    def test_closed_stream(self):
        stream = io.StringIO()
        stream.close()
        assert supports_color(stream, environ={}) is False

    @pytest.mark.parametrize("mode,expected", [("always", True), ("never", False), ("auto", False)])
    def test_resolve_modes(self, mode, expected):
        assert resolve_color(io.StringIO(), mode=mode) is expected

    def test_resolve_reads_config(self):
        set_config(RenderConfig(color="always"))
        assert resolve_color(io.StringIO()) is True

    def test_probe_queried_per_render(self, monkeypatch):
        calls = []

        def fake_probe(stream, mode=None):
            calls.append(stream)
            return len(calls) == 2

        monkeypatch.setattr("user_error.cli.terminal.resolve_color", fake_probe)
        err = StructuredError.new("s")
        first = err.render()
        second = err.render()
        assert len(calls) == 2
        assert first == "Error: s\n"
        assert second != first
        assert click.unstyle(second) == first


class TestPrintWithConfig:

    def test_show_causes(self, capsys):
        set_config(RenderConfig(show_causes=True))
        err = StructuredError(summary="Failed to save", causes=["disk full"])
        err.print(color=False)
        assert capsys.readouterr().err == "Error: Failed to save\ndisk full\n"

    def test_config_is_read_before_error_is_written(self, capsys, monkeypatch):
        written_before_lookup = []

        def recording_get_config():
            written_before_lookup.append(capsys.readouterr().err)
            return RenderConfig(show_causes=True)

        monkeypatch.setattr("user_error.config.get_config", recording_get_config)
        StructuredError(summary="Failed to save", causes=["disk full"]).print(color=False)
        assert written_before_lookup == [""]
        assert capsys.readouterr().err == "Error: Failed to save\ndisk full\n"

    def test_causes_hidden_by_default(self, capsys):
        StructuredError(summary="Failed to save", causes=["disk full"]).print(color=False)
        assert capsys.readouterr().err == "Error: Failed to save\n"

    def test_forced_color_reaches_stderr(self, capsys):
        set_config(RenderConfig(color="always"))
        StructuredError.new("s").print()
        assert capsys.readouterr().err == click.style("Error:", fg="white", bg="red", bold=True) + " " + click.style("s", fg="red", bold=True) + "\n"
