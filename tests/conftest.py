import pytest
from pathlib import Path
from fatcat.config import MB, GB


def make_file(path: Path, size: int) -> Path:
    """Creates a sparse file of the given logical size (no disk blocks used)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "wb") as f:
        f.truncate(size)
    return path


@pytest.fixture
def fat_tree(tmp_path):
    """
    root/
      a.bin          50 MB
      sub/b.bin     150 MB
      sub/deep/c.bin 600 MB
      d.bin           2 GB
    """
    root = tmp_path / "root"
    root.mkdir()
    make_file(root / "a.bin", 50 * MB)
    make_file(root / "sub" / "b.bin", 150 * MB)
    make_file(root / "sub" / "deep" / "c.bin", 600 * MB)
    make_file(root / "d.bin", 2 * GB)
    return root


@pytest.fixture
def small_tree(tmp_path):
    """A tree with tiny files, hidden entries and an empty file."""
    root = tmp_path / "small"
    (root / "docs").mkdir(parents=True)
    (root / ".cache").mkdir()
    (root / "docs" / "readme.txt").write_bytes(b"x" * 10)
    (root / "docs" / "notes.txt").write_bytes(b"x" * 300)
    (root / ".cache" / "blob").write_bytes(b"x" * 2000)
    (root / ".hidden").write_bytes(b"x" * 50)
    (root / "empty").write_bytes(b"")
    return root
