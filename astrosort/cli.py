import logging
from pathlib import Path

import typer
from rich.console import Console

from .classifier import classify_folders
from .errors import AstroSortError, UserCancelledError
from .models import ReorganizePlan
from .prompt import ProgressSink, Prompter, RichProgress, RichPrompter, show_folders
from .reorganize import reorganize
from .scanner import resolve_root, scan_folders, select_folders
from .session import correct_folders

app = typer.Typer(help="Astrosort - Sort astrophotography captures into Light/Dark/Flat/Bias folders")
console = Console()
logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure logging; warnings only by default to keep the prompts readable."""
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def make_prompter() -> Prompter:
    return RichPrompter(console)


def run(
    prompter: Prompter,
    progress: ProgressSink,
    suggested_path: str,
    object_name: str | None = None,
    capture_label: str | None = None,
    show=None,
) -> ReorganizePlan:
    """Whole workflow: path, names, scan, classify, correct, copy."""
    root = resolve_root(prompter, suggested_path)
    if object_name is None:
        object_name = prompter.ask_text("Enter name of captured object", "")
    if capture_label is None:
        capture_label = prompter.ask_text(
            "Enter capture time (ideally in format YYYY-MM-DD)", "",
        )

    folders = classify_folders(select_folders(prompter, scan_folders(root)))
    correct_folders(prompter, folders, show)
    return reorganize(prompter, progress, root, folders, object_name, capture_label)


@app.command()
def main(
    path: str = typer.Option(
        None, "--path", "-p", envvar="ASTROSORT_PATH",
        help="Folder with capture folders (default: current directory)",
    ),
    object_name: str = typer.Option(
        None, "--object", "-o", envvar="ASTROSORT_OBJECT",
        help="Name of the captured object, e.g. M51",
    ),
    capture: str = typer.Option(
        None, "--capture", "-c", envvar="ASTROSORT_CAPTURE",
        help="Capture session label, ideally YYYY-MM-DD",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log errors"),
):
    """Detect folder types, let you correct them and copy them into <object>-<capture>/."""
    setup_logging(verbose=verbose, quiet=quiet)
    prompter = make_prompter()

    try:
        with RichProgress(console) as progress:
            run(
                prompter,
                progress,
                path or str(Path.cwd()),
                object_name=object_name,
                capture_label=capture,
                show=lambda folders: show_folders(console, folders),
            )
    except UserCancelledError as e:
        console.print(f"[bold red]{e}[/bold red]")
        raise typer.Exit(0)
    except (AstroSortError, OSError) as e:
        logger.error(f"Reorganizing failed: {e}")
        console.print(f"[bold red]{e}[/bold red]")
        raise typer.Exit(1)

    console.print("[bold green]Copying done![/bold green]")


if __name__ == "__main__":
    app()
