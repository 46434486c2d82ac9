"""
Shared fixtures for scan core tests.
Creates isolated temporary directories with controlled image files.
"""
import pytest
import tempfile
from pathlib import Path
from typing import Dict
import sys

# Add src/ to sys.path so 'imgdupes' is importable without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def image_tree(temp_dir) -> Dict[str, Path]:
    """
    Creates controlled files for duplicate detection scenarios:
    - a.jpg / b.JPG / photos/c.jpeg share content (one group of 3)
    - d.png / photos/e.png share content (one group of 2)
    - unique.gif has unique content
    - notes.txt matches a.jpg content but has an ignored extension
    - README has no extension at all
    """
    files = {}

    content_a = b"\xff\xd8\xff" + b"A" * 10_000
    content_b = b"\x89PNG" + b"B" * 20_000

    photos = temp_dir / "photos"
    photos.mkdir()

    files["a"] = temp_dir / "a.jpg"
    files["b"] = temp_dir / "b.JPG"
    files["c"] = photos / "c.jpeg"
    for key in ("a", "b", "c"):
        files[key].write_bytes(content_a)

    files["d"] = temp_dir / "d.png"
    files["e"] = photos / "e.png"
    files["d"].write_bytes(content_b)
    files["e"].write_bytes(content_b)

    files["unique"] = temp_dir / "unique.gif"
    files["unique"].write_bytes(b"GIF89a" + b"C" * 500)

    files["text"] = temp_dir / "notes.txt"
    files["text"].write_bytes(content_a)

    files["noext"] = temp_dir / "README"
    files["noext"].write_bytes(content_a)

    return files
