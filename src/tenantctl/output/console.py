"""Rich Console factory and theme for tenantctl output.

Consoles render into a StringIO buffer so ``format_result()`` keeps
returning a plain ``str``. Rich drops color codes on its own when the
buffer is not a terminal (CliRunner, pipes).
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

TENANT_THEME = Theme(
    {
        "tenant.ok": "bold green",
        "tenant.error": "bold red",
        "tenant.op": "bold cyan",
        "tenant.key": "dim",
        "tenant.id": "bold blue",
        "tenant.name": "bold",
        "tenant.owner": "magenta",
        "tenant.member": "green",
    }
)

_USER_TYPE_STYLES: dict[str, str] = {
    "owner": "tenant.owner",
    "member": "tenant.member",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (keeps table layout stable in tests).
    """
    return Console(
        file=StringIO(),
        theme=TENANT_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_user_type(user_type: str) -> str:
    """Return the Rich style name for a mapping's user type."""
    return _USER_TYPE_STYLES.get(user_type, "")
