import logging
import shutil
from pathlib import Path

from .errors import UserCancelledError
from .models import ClassifiedFolder, ReorganizePlan
from .prompt import ProgressSink, Prompter

logger = logging.getLogger(__name__)


def build_plan(
    base: Path,
    folders: list[ClassifiedFolder],
    object_name: str,
    capture_label: str,
) -> ReorganizePlan:
    """Destination path plus the folders that will be copied (Unknown left out)."""
    return ReorganizePlan(
        destination=base / f"{object_name}-{capture_label}",
        folders=[folder for folder in folders if folder.is_concrete],
    )


def _create_destination(prompter: Prompter, destination: Path) -> None:
    try:
        destination.mkdir()
    except FileExistsError:
        if not prompter.ask_confirm(
            f"Folder {destination} already exists, do you want to continue?"
        ):
            raise UserCancelledError()
        logger.info(f"Continuing into existing folder {destination}")
    else:
        logger.info(f"Created {destination}")


def _copy_folder(
    folder: ClassifiedFolder, destination: Path, progress: ProgressSink,
) -> None:
    target = destination / folder.role.value
    if not target.exists():
        target.mkdir()

    entries = list(folder.path.iterdir())
    progress.begin(len(entries), folder.path.name)
    for copied, entry in enumerate(entries, start=1):
        shutil.copyfile(entry, target / entry.name)
        progress.advance(copied)
    progress.finish(f"✅ {folder.path.name}")
    logger.info(f"Copied {len(entries)} files from {folder.path} to {target}")


def _delete_sources(plan: ReorganizePlan, progress: ProgressSink) -> None:
    progress.begin(len(plan.folders), "Deleting folders...")
    for deleted, folder in enumerate(plan.folders, start=1):
        shutil.rmtree(folder.path)
        logger.info(f"Deleted {folder.path}")
        progress.advance(deleted)
    progress.finish("Done")


def reorganize(
    prompter: Prompter,
    progress: ProgressSink,
    base: Path,
    folders: list[ClassifiedFolder],
    object_name: str,
    capture_label: str,
) -> ReorganizePlan:
    """Copy every non-Unknown folder under its role, then offer to delete sources.

    Raises UserCancelledError when the operator declines to start or to reuse
    an existing destination; filesystem errors propagate unchanged. Declining
    the deletion is a normal outcome. Nothing is rolled back on failure.
    """
    if not prompter.ask_confirm("Do you want to proceed with copying?"):
        raise UserCancelledError()

    plan = build_plan(base, folders, object_name, capture_label)
    _create_destination(prompter, plan.destination)

    for folder in plan.folders:
        _copy_folder(folder, plan.destination, progress)

    if prompter.ask_confirm("Do you want to delete old folders?"):
        _delete_sources(plan, progress)
    else:
        logger.info("Keeping original folders")

    return plan
