"""
Shared fixtures for dupsweep tests.
Creates isolated temporary directories with controlled test files.
"""
import pytest
import tempfile
from pathlib import Path
from typing import Dict


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def scenario_dir(temp_dir) -> Path:
    """
    The reference scenario:
    - a.txt / b.txt: identical content (true duplicates)
    - c.txt, d.txt, e.txt: all 23 bytes, all different content
    """
    (temp_dir / "a.txt").write_bytes(b"Hello World identical")
    (temp_dir / "b.txt").write_bytes(b"Hello World identical")
    (temp_dir / "c.txt").write_bytes(b"Hello World unique here")
    (temp_dir / "d.txt").write_bytes(b"Size identical, but...A")
    (temp_dir / "e.txt").write_bytes(b"Size identical, but...B")
    return temp_dir


@pytest.fixture
def test_files(temp_dir) -> Dict[str, Path]:
    """
    Creates controlled test files for duplicate scenarios:
    - 2 identical files of 1KB
    - 3 identical files of 2KB
    - 2 unique files
    - 1 subdirectory holding another copy of the 1KB content
    """
    files = {}

    content_a = b"A" * 1024
    files["dup1_a"] = temp_dir / "dup1_a.txt"
    files["dup1_b"] = temp_dir / "dup1_b.txt"
    files["dup1_a"].write_bytes(content_a)
    files["dup1_b"].write_bytes(content_a)

    content_b = b"B" * 2048
    for name in ("dup2_a", "dup2_b", "dup2_c"):
        files[name] = temp_dir / f"{name}.bin"
        files[name].write_bytes(content_b)

    files["unique1"] = temp_dir / "unique1.txt"
    files["unique1"].write_bytes(b"C" * 1500)
    files["unique2"] = temp_dir / "unique2.txt"
    files["unique2"].write_bytes(b"D" * 2500)

    subdir = temp_dir / "subdir"
    subdir.mkdir()
    files["sub_dup"] = subdir / "dup_in_subdir.txt"
    files["sub_dup"].write_bytes(content_a)

    return files
