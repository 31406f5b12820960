import logging
from datetime import datetime
from pathlib import Path

from .errors import ValidationError
from .models import CandidateFolder
from .prompt import Prompter

logger = logging.getLogger(__name__)


def resolve_root(prompter: Prompter, suggested: str) -> Path:
    """Ask for the photo folder, starting from the suggested path."""
    answer = prompter.ask_text("Enter path to photos", suggested)
    path = Path(answer).expanduser()
    if not path.exists():
        raise ValidationError(f"Path doesn't exist: {answer}")
    return path


def scan_folders(root: Path, now: datetime | None = None) -> list[CandidateFolder]:
    """List the immediate subfolders of root, oldest-modified first.

    Files are skipped. Any error reading root or one of its entries is
    raised as-is, there is no partial result.
    """
    now = now or datetime.now()
    folders: list[CandidateFolder] = []
    for entry in root.iterdir():
        if not entry.is_dir():
            continue
        modified = datetime.fromtimestamp(entry.stat().st_mtime)
        folders.append(CandidateFolder(path=entry, age=now - modified))

    # Largest age first == oldest modification first
    folders.sort(key=lambda folder: folder.age, reverse=True)
    logger.debug(f"Found {len(folders)} folders in {root}")
    return folders


def select_folders(
    prompter: Prompter, candidates: list[CandidateFolder],
) -> list[CandidateFolder]:
    """Let the operator choose folders with data; keeps scan order."""
    if not candidates:
        return []
    chosen = prompter.ask_multiselect(
        "Select folders with data",
        [folder.path.name for folder in candidates],
    )
    selected = [folder for i, folder in enumerate(candidates) if i in chosen]
    logger.info(f"Selected {len(selected)} of {len(candidates)} folders")
    return selected
