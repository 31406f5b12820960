import re
from typing import Protocol, Sequence

from rich.console import Console
from rich.markup import escape
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeElapsedColumn,
    TimeRemainingColumn,
)
from rich.prompt import Confirm, IntPrompt, Prompt

from .models import ClassifiedFolder, RoleLabel

# Presentation only, the data model carries no styling.
ROLE_STYLES = {
    RoleLabel.LIGHT: "bold white",
    RoleLabel.DARK: "bold black",
    RoleLabel.FLAT: "bold yellow",
    RoleLabel.BIAS: "bold red",
    RoleLabel.UNKNOWN: "bold blue",
}


class Prompter(Protocol):
    def ask_text(self, prompt: str, initial: str = "") -> str: ...

    def ask_confirm(self, prompt: str) -> bool: ...

    def ask_select(
        self, prompt: str, options: Sequence[str], default: int | None = None,
    ) -> int: ...

    def ask_multiselect(self, prompt: str, options: Sequence[str]) -> set[int]: ...


class ProgressSink(Protocol):
    def begin(self, total: int, label: str) -> None: ...

    def advance(self, position: int) -> None: ...

    def finish(self, message: str) -> None: ...


def format_role(role: RoleLabel) -> str:
    return f"[{ROLE_STYLES[role]}]{role.value}[/]"


def format_folder(folder: ClassifiedFolder) -> str:
    """Rich markup for a folder line: '<path> - <Role>'."""
    return f"[bold yellow]{escape(str(folder.path))}[/] - {format_role(folder.role)}"


def show_folders(console: Console, folders: list[ClassifiedFolder]) -> None:
    console.print("[bold cyan]Here is a list of folders, and their detected type:[/]")
    for folder in folders:
        console.print(format_folder(folder))


def parse_indices(answer: str, count: int) -> set[int]:
    """Parse '1, 3 4' / 'all' / '' into zero-based indices below count."""
    answer = answer.strip().lower()
    if not answer:
        return set()
    if answer == "all":
        return set(range(count))

    indices = set()
    for token in re.split(r"[,\s]+", answer):
        if not token:
            continue
        if not token.isdigit() or not 1 <= int(token) <= count:
            raise ValueError(f"Invalid choice: {token}")
        indices.add(int(token) - 1)
    return indices


class RichPrompter:
    """Prompter backed by rich.prompt on a shared console."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def ask_text(self, prompt: str, initial: str = "") -> str:
        return Prompt.ask(
            f"[bold]{prompt}[/]",
            default=initial,
            show_default=bool(initial),
            console=self.console,
        )

    def ask_confirm(self, prompt: str) -> bool:
        return Confirm.ask(f"[bold]{prompt}[/]", console=self.console)

    def _print_options(self, options: Sequence[str]) -> None:
        for number, option in enumerate(options, start=1):
            self.console.print(f"  [bold cyan]{number:>2}[/] {option}")

    def ask_select(
        self, prompt: str, options: Sequence[str], default: int | None = None,
    ) -> int:
        self.console.print(f"[bold]{prompt}[/]")
        self._print_options(options)
        choices = [str(n) for n in range(1, len(options) + 1)]
        if default is None:
            answer = IntPrompt.ask(
                "Number", choices=choices, show_choices=False, console=self.console,
            )
        else:
            answer = IntPrompt.ask(
                "Number", choices=choices, show_choices=False,
                default=default + 1, console=self.console,
            )
        return answer - 1

    def ask_multiselect(self, prompt: str, options: Sequence[str]) -> set[int]:
        self.console.print(f"[bold]{prompt}[/]")
        self._print_options(options)
        while True:
            answer = Prompt.ask(
                "Numbers separated by commas, 'all' or empty for none",
                default="",
                show_default=False,
                console=self.console,
            )
            try:
                return parse_indices(answer, len(options))
            except ValueError as e:
                self.console.print(f"[red]{e}[/red]")


class RichProgress:
    """ProgressSink showing one rich progress bar per begin/finish pair.

    Use as a context manager so a bar left open by an aborted copy is
    stopped before the error is reported.
    """

    def __init__(self, console: Console | None = None):
        self.console = console or Console()
        self._progress: Progress | None = None
        self._task = None

    def begin(self, total: int, label: str) -> None:
        self.close()
        self._progress = Progress(
            TextColumn("{task.description}"),
            SpinnerColumn(style="green"),
            TimeElapsedColumn(),
            BarColumn(complete_style="cyan", finished_style="blue"),
            MofNCompleteColumn(),
            TimeRemainingColumn(),
            console=self.console,
        )
        self._progress.start()
        self._task = self._progress.add_task(escape(label), total=total)

    def advance(self, position: int) -> None:
        if self._progress is not None:
            self._progress.update(self._task, completed=position)

    def finish(self, message: str) -> None:
        if self._progress is None:
            return
        self._progress.update(self._task, description=escape(message))
        self.close()

    def close(self) -> None:
        if self._progress is not None:
            self._progress.stop()
            self._progress = None
            self._task = None

    def __enter__(self) -> "RichProgress":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
