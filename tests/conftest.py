"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from gemmit.git.status import StagedStatus


class ScriptedTerminal:
    """Terminal double that replays queued answers and records output."""

    def __init__(self, answers=None):
        self.answers = list(answers or [])
        self.prompts = []
        self.lines = []

    def ask(self, text):
        self.prompts.append(text)
        if not self.answers:
            raise AssertionError(f"Unexpected prompt: {text}")
        return self.answers.pop(0)

    def echo(self, message="", err=False):
        self.lines.append(message)

    @property
    def output(self):
        return "\n".join(self.lines)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def make_terminal():
    """Factory for scripted terminals."""
    return ScriptedTerminal


@pytest.fixture
def terminal():
    """A scripted terminal with no queued answers."""
    return ScriptedTerminal()


@pytest.fixture
def fake_repository():
    """Repository double with one staged file and a small diff."""
    repo = MagicMock()
    repo.is_repository_root.return_value = True
    repo.staged_diff.return_value = "+x"
    repo.staged_status.return_value = StagedStatus(staged_files=["x.py"])
    repo.commit.return_value = None
    return repo


@pytest.fixture
def fake_provider():
    """Text-generation provider double."""
    provider = MagicMock()
    provider.generate.return_value = (
        "feat(core): add x\nfix(core): remove y\ndocs(core): note x"
    )
    return provider


@pytest.fixture
def sample_diff():
    """Sample staged diff."""
    return """diff --git a/app.py b/app.py
index 1234567..abcdefg 100644
--- a/app.py
+++ b/app.py
@@ -1,2 +1,3 @@
 def main():
-    print("old")
+    print("new")
+    return 0
"""


@pytest.fixture
def mock_git_commands(mocker):
    """Mock subprocess.run for git commands."""
    return mocker.patch("subprocess.run")
