"""Shared fixtures: scripted operator and progress recorder."""
import os
from datetime import datetime, timedelta
from pathlib import Path

import pytest


class ScriptedPrompter:
    """Answers prompts from a queue and records what was asked."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.asked = []

    def _next(self, kind, prompt, **details):
        self.asked.append((kind, prompt, details))
        if not self.answers:
            raise AssertionError(f"Unexpected prompt: {kind} {prompt!r}")
        return self.answers.pop(0)

    def ask_text(self, prompt, initial=""):
        return self._next("text", prompt, initial=initial)

    def ask_confirm(self, prompt):
        return self._next("confirm", prompt)

    def ask_select(self, prompt, options, default=None):
        return self._next("select", prompt, options=list(options), default=default)

    def ask_multiselect(self, prompt, options):
        return self._next("multiselect", prompt, options=list(options))

    def prompts(self, kind):
        return [prompt for k, prompt, _ in self.asked if k == kind]


class RecordingProgress:
    def __init__(self):
        self.events = []

    def begin(self, total, label):
        self.events.append(("begin", total, label))

    def advance(self, position):
        self.events.append(("advance", position))

    def finish(self, message):
        self.events.append(("finish", message))


def make_folder(root: Path, name: str, files: dict[str, bytes], age: timedelta) -> Path:
    """Create root/name with files and set its mtime to now - age."""
    folder = root / name
    folder.mkdir()
    for filename, content in files.items():
        (folder / filename).write_bytes(content)
    stamp = (datetime.now() - age).timestamp()
    os.utime(folder, (stamp, stamp))
    return folder


@pytest.fixture
def progress():
    return RecordingProgress()


@pytest.fixture
def capture_root(tmp_path):
    """Three capture folders: A (Light, 3 days old), B (Dark, 1 day), C (empty, 2 days)."""
    root = tmp_path / "captures"
    root.mkdir()
    make_folder(root, "A", {"Light001.fit": b"light frame"}, timedelta(days=3))
    make_folder(root, "B", {"Dark1.fit": b"dark frame"}, timedelta(days=1))
    make_folder(root, "C", {}, timedelta(days=2))
    return root
