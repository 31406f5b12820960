import logging
from pathlib import Path

from .models import CandidateFolder, ClassifiedFolder, RoleLabel

logger = logging.getLogger(__name__)

# Priority order, checked for every entry.
ROLE_PREFIXES = [
    ("Light", RoleLabel.LIGHT),
    ("Flat", RoleLabel.FLAT),
    ("Dark", RoleLabel.DARK),
    ("Bias", RoleLabel.BIAS),
]


def _match_prefix(name: str) -> RoleLabel | None:
    for prefix, role in ROLE_PREFIXES:
        if name.startswith(prefix):
            return role
    return None


def classify_folder(path: Path) -> RoleLabel:
    """Return the role of the first entry in path with a known prefix.

    Entries are visited in directory-iteration order, not sorted, so a
    folder mixing e.g. Light_* and Dark_* files may classify differently
    on another filesystem.
    """
    for entry in path.iterdir():
        role = _match_prefix(entry.name)
        if role is not None:
            logger.debug(f"{path}: {entry.name} -> {role.value}")
            return role
    logger.debug(f"{path}: no known prefix, marking Unknown")
    return RoleLabel.UNKNOWN


def classify_folders(folders: list[CandidateFolder]) -> list[ClassifiedFolder]:
    """Classify each folder, keeping input order. OSError aborts the batch."""
    return [
        ClassifiedFolder(path=folder.path, role=classify_folder(folder.path))
        for folder in folders
    ]
