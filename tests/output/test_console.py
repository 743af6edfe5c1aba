"""Tests for the Rich Console factory and theme."""

from io import StringIO

from pieshop.output.console import PIE_THEME, create_console, get_output


class TestCreateConsole:
    def test_returns_console_with_stringio(self) -> None:
        assert isinstance(create_console().file, StringIO)

    def test_no_color_disables_ansi(self) -> None:
        console = create_console(no_color=True)
        console.print("[pie.total]50.85[/pie.total]")
        output = get_output(console)
        assert "\x1b" not in output
        assert "50.85" in output

    def test_widths(self) -> None:
        assert create_console().width == 120
        assert create_console(width=80).width == 80


class TestTheme:
    def test_pie_styles_registered(self) -> None:
        for name in ("pie.ok", "pie.error", "pie.price", "pie.total", "pie.week", "pie.soldout"):
            assert name in PIE_THEME.styles
