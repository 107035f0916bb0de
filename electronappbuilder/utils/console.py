from rich.console import Console
from rich.markup import escape

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def success(msg: str) -> None:
    console.print(f"[green]✔[/] {escape(msg)}")


def warn(msg: str) -> None:
    err_console.print(f"[yellow]⚠ {escape(msg)}[/]")


def fail(msg: str) -> None:
    err_console.print(f"[red]✖ {escape(msg)}[/]")
