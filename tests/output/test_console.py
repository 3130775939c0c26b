"""Tests for the Rich Console factory and theme."""

from io import StringIO

from tenantctl.output.console import (
    TENANT_THEME,
    create_console,
    get_output,
    style_for_user_type,
)


class TestCreateConsole:
    def test_returns_console_with_stringio(self) -> None:
        console = create_console()
        assert isinstance(console.file, StringIO)

    def test_no_color_disables_ansi(self) -> None:
        console = create_console(no_color=True)
        console.print("[bold red]hello[/bold red]")
        output = get_output(console)
        assert "\x1b" not in output
        assert "hello" in output

    def test_custom_width(self) -> None:
        assert create_console(width=80).width == 80

    def test_default_width(self) -> None:
        assert create_console().width == 120

    def test_theme_styles_resolve(self) -> None:
        console = create_console()
        console.print("[tenant.ok]OK[/tenant.ok]")
        assert get_output(console) == "OK\n"
        assert "tenant.error" in TENANT_THEME.styles


class TestStyleForUserType:
    def test_known_types(self) -> None:
        assert style_for_user_type("owner") == "tenant.owner"
        assert style_for_user_type("member") == "tenant.member"

    def test_unknown_type(self) -> None:
        assert style_for_user_type("guest") == ""
