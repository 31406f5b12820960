import logging
from typing import Callable

from .models import ClassifiedFolder, RoleLabel
from .prompt import Prompter, format_folder, format_role

logger = logging.getLogger(__name__)

EXIT_CHOICE = "[bold red]Edit done - EXIT[/]"


def _edit_role(prompter: Prompter, folder: ClassifiedFolder) -> None:
    roles = RoleLabel.concrete()
    default = roles.index(folder.role) if folder.role in roles else None
    choice = prompter.ask_select(
        "Select folder type",
        [format_role(role) for role in roles],
        default=default,
    )
    new_role = roles[choice] if 0 <= choice < len(roles) else RoleLabel.UNKNOWN
    logger.info(f"{folder.path}: {folder.role.value} -> {new_role.value}")
    folder.role = new_role


def correct_folders(
    prompter: Prompter,
    folders: list[ClassifiedFolder],
    show: Callable[[list[ClassifiedFolder]], None] | None = None,
) -> list[ClassifiedFolder]:
    """Review roles until the operator confirms them or leaves the editor.

    Only roles change; the list keeps its entries and order. Leaving the
    editor is final, the review question is not asked again.
    """
    if show is not None:
        show(folders)

    if prompter.ask_confirm("Is folder types correct? (Unknown folders will be ignored)"):
        return folders

    while True:
        selected = prompter.ask_select(
            "Select folder to edit",
            [format_folder(folder) for folder in folders] + [EXIT_CHOICE],
        )
        if not 0 <= selected < len(folders):
            return folders
        _edit_role(prompter, folders[selected])
