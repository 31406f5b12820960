"""Tests for the review/edit loop over detected roles."""
from pathlib import Path

from conftest import ScriptedPrompter
from astrosort.models import ClassifiedFolder, RoleLabel
from astrosort.session import correct_folders


def _folders():
    return [
        ClassifiedFolder(Path("/captures/A"), RoleLabel.LIGHT),
        ClassifiedFolder(Path("/captures/C"), RoleLabel.UNKNOWN),
        ClassifiedFolder(Path("/captures/B"), RoleLabel.DARK),
    ]


def test_confirmed_types_are_returned_unchanged():
    folders = _folders()
    prompter = ScriptedPrompter([True])

    result = correct_folders(prompter, folders)

    assert result == _folders()
    assert [kind for kind, _, _ in prompter.asked] == ["confirm"]


def test_show_is_called_before_asking():
    shown = []
    prompter = ScriptedPrompter([True])
    correct_folders(prompter, _folders(), show=lambda folders: shown.append(len(folders)))
    assert shown == [3]


def test_edit_changes_only_the_role():
    folders = _folders()
    # decline, pick C, choose Flat (index 2), leave editor
    prompter = ScriptedPrompter([False, 1, 2, 3])

    result = correct_folders(prompter, folders)

    assert result is folders
    assert [f.path for f in result] == [f.path for f in _folders()]
    assert [f.role for f in result] == [RoleLabel.LIGHT, RoleLabel.FLAT, RoleLabel.DARK]


def test_edit_menu_lists_folders_and_exit():
    prompter = ScriptedPrompter([False, 3])
    correct_folders(prompter, _folders())

    _, prompt, details = prompter.asked[1]
    assert prompt == "Select folder to edit"
    assert len(details["options"]) == 4
    assert "/captures/A" in details["options"][0]
    assert "EXIT" in details["options"][-1]


def test_role_menu_defaults_to_current_role():
    # pick B (Dark), keep Dark, pick C (Unknown), choose Bias, exit
    prompter = ScriptedPrompter([False, 2, 1, 1, 3, 3])
    folders = correct_folders(prompter, _folders())

    role_prompts = [d for k, p, d in prompter.asked if p == "Select folder type"]
    assert role_prompts[0]["default"] == 1
    assert role_prompts[1]["default"] is None
    assert len(role_prompts[0]["options"]) == 4
    assert folders[2].role is RoleLabel.DARK
    assert folders[1].role is RoleLabel.BIAS


def test_choice_outside_roles_resets_to_unknown():
    prompter = ScriptedPrompter([False, 0, 4, 3])
    folders = correct_folders(prompter, _folders())
    assert folders[0].role is RoleLabel.UNKNOWN


def test_leaving_editor_skips_second_confirmation():
    prompter = ScriptedPrompter([False, 0, 3, 3])
    correct_folders(prompter, _folders())
    assert len(prompter.prompts("confirm")) == 1
    assert prompter.answers == []
