"""Shared test fixtures and configuration."""

import shutil
import subprocess
import tempfile
from pathlib import Path

import pytest

from hunkgraph.graph import Commit


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config_dir(monkeypatch, temp_dir):
    """Point the hunkgraph config directory at a temporary location."""
    config_path = temp_dir / ".hunkgraph"
    monkeypatch.setattr("hunkgraph.config._CONFIG_DIR", config_path)
    return config_path


@pytest.fixture
def sample_file_diff():
    """Single-file diff with one hunk: ctx a, del b, add c, add d, ctx e."""
    return """diff --git a/src/app.py b/src/app.py
index 1234567..89abcde 100644
--- a/src/app.py
+++ b/src/app.py
@@ -10,3 +10,4 @@ def main():
 a
-b
+c
+d
 e
"""


@pytest.fixture
def sample_multi_file_diff():
    """Diff covering a modified file and a new file."""
    return """diff --git a/src/main.py b/src/main.py
index 1234567..abcdefg 100644
--- a/src/main.py
+++ b/src/main.py
@@ -10,6 +10,8 @@ def main():
     print("Hello")
+    print("World")
+    print("!")
     return 0
@@ -20,3 +22,5 @@ def helper():
     pass
+    # New comment
+    return True
diff --git a/tests/test_main.py b/tests/test_main.py
new file mode 100644
index 0000000..1234567
--- /dev/null
+++ b/tests/test_main.py
@@ -0,0 +1,3 @@
+import pytest
+
+def test_main():
"""


@pytest.fixture
def linear_commits():
    """A -> B -> C, newest first; C is the root."""
    return [
        Commit("A", ("B",)),
        Commit("B", ("C",)),
        Commit("C"),
    ]


@pytest.fixture
def merge_commits():
    """Merge M of A and B, both branching from root R."""
    return [
        Commit("M", ("A", "B")),
        Commit("A", ("R",)),
        Commit("B", ("R",)),
        Commit("R"),
    ]


def _git(repo: Path, *args: str, input_text: str = None) -> subprocess.CompletedProcess:
    return subprocess.run(
        ["git", *args],
        cwd=repo,
        input=input_text,
        capture_output=True,
        text=True,
    )


@pytest.fixture
def git():
    """Run git in a repository: git(repo, *args, input_text=None)."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")
    return _git


@pytest.fixture
def temp_repo(tmp_path, git):
    """Create a temporary git repository with f.txt = a, b, e committed."""
    repo_dir = tmp_path / "test_repo"
    repo_dir.mkdir()

    git(repo_dir, "init")
    git(repo_dir, "config", "user.email", "test@example.com")
    git(repo_dir, "config", "user.name", "Test User")

    (repo_dir / "f.txt").write_text("a\nb\ne\n")
    git(repo_dir, "add", "f.txt")
    git(repo_dir, "commit", "-m", "Initial commit")

    return repo_dir
