"""
Unit tests for HasherImpl with SHA-256 and xxHash3-128 algorithms.
Verifies streamed digests match one-shot digests and that read failures raise ReadError.
"""
import hashlib

import pytest
import xxhash

from dupsweep.core.errors import ReadError
from dupsweep.core.hasher import (
    HasherImpl, Sha256AlgorithmImpl, XXHash128AlgorithmImpl, get_algorithm,
)
from dupsweep.core.models import File


class TestHasherImpl:
    """Test chunked content hashing."""

    def test_same_content_produces_same_digest(self, tmp_path):
        """Identical files must produce identical 64-char SHA-256 hex digests."""
        content = b"test content " * 1000
        f1 = tmp_path / "one.bin"
        f2 = tmp_path / "two.bin"
        f1.write_bytes(content)
        f2.write_bytes(content)

        hasher = HasherImpl()
        d1 = hasher.compute_digest(str(f1))
        d2 = hasher.compute_digest(str(f2))

        assert d1 == d2
        assert len(d1) == 64
        assert d1 == d1.lower()

    def test_different_content_produces_different_digests(self, tmp_path):
        f1 = tmp_path / "a.bin"
        f2 = tmp_path / "b.bin"
        f1.write_bytes(b"A" * 1024)
        f2.write_bytes(b"B" * 1024)

        hasher = HasherImpl(Sha256AlgorithmImpl())
        assert hasher.compute_digest(str(f1)) != hasher.compute_digest(str(f2))

    def test_streamed_digest_matches_hashlib(self, tmp_path):
        """
        Content spanning several chunks (with a partial last chunk) must hash
        exactly like a one-shot SHA-256 of the whole file.
        """
        content = bytes(range(256)) * 100  # 25600 bytes, not a multiple of 8 KiB
        target = tmp_path / "multi_chunk.bin"
        target.write_bytes(content)

        digest = HasherImpl(chunk_size=8 * 1024).compute_digest(str(target))
        assert digest == hashlib.sha256(content).hexdigest()

    def test_chunk_size_does_not_change_digest(self, tmp_path):
        content = b"0123456789" * 500
        target = tmp_path / "data.bin"
        target.write_bytes(content)

        small = HasherImpl(chunk_size=7).compute_digest(str(target))
        large = HasherImpl(chunk_size=1024 * 1024).compute_digest(str(target))
        assert small == large

    def test_empty_file_has_digest(self, tmp_path):
        empty = tmp_path / "empty.txt"
        empty.write_bytes(b"")
        assert HasherImpl().compute_digest(str(empty)) == hashlib.sha256(b"").hexdigest()

    def test_xxh128_algorithm(self, tmp_path):
        content = b"xxhash content" * 300
        target = tmp_path / "x.bin"
        target.write_bytes(content)

        digest = HasherImpl(XXHash128AlgorithmImpl()).compute_digest(str(target))
        assert digest == xxhash.xxh3_128(content).hexdigest()
        assert len(digest) == 32

    def test_missing_file_raises_read_error(self, tmp_path):
        """A file deleted before hashing must raise ReadError, never yield a digest."""
        target = tmp_path / "deleted.txt"
        target.write_bytes(b"content")
        target.unlink()

        with pytest.raises(ReadError) as exc_info:
            HasherImpl().compute_digest(str(target))
        assert exc_info.value.path == str(target)

    def test_read_failure_mid_stream_raises(self, tmp_path, monkeypatch):
        """
        If a read fails after some chunks were consumed, no partial digest is produced.
        """
        target = tmp_path / "flaky.bin"
        target.write_bytes(b"Z" * 40000)

        real_open = open
        calls = {"reads": 0}

        class FlakyReader:
            def __init__(self, fh):
                self._fh = fh

            def read(self, size):
                calls["reads"] += 1
                if calls["reads"] == 3:
                    raise OSError("Input/output error")
                return self._fh.read(size)

            def __enter__(self):
                return self

            def __exit__(self, *exc):
                self._fh.close()
                return False

        def flaky_open(path, mode="r", *args, **kwargs):
            return FlakyReader(real_open(path, mode, *args, **kwargs))

        monkeypatch.setattr("dupsweep.core.hasher.open", flaky_open, raising=False)

        with pytest.raises(ReadError, match="Input/output error"):
            HasherImpl(chunk_size=8192).compute_digest(str(target))
        assert calls["reads"] == 3

    def test_compute_full_hash_reuses_stored_digest(self, tmp_path):
        """A record that already carries a real digest is not re-read."""
        record = File(path=str(tmp_path / "gone.txt"), size=3, digest="abc123")
        assert HasherImpl().compute_full_hash(record) == "abc123"

    def test_compute_full_hash_ignores_size_token(self, tmp_path):
        target = tmp_path / "f.txt"
        target.write_bytes(b"abc")
        record = File(path=str(target), size=3, digest="size_3")
        assert HasherImpl().compute_full_hash(record) == hashlib.sha256(b"abc").hexdigest()

    def test_invalid_chunk_size(self):
        with pytest.raises(ValueError):
            HasherImpl(chunk_size=0)


class TestAlgorithmRegistry:

    def test_lookup_is_case_insensitive(self):
        assert isinstance(get_algorithm("SHA256"), Sha256AlgorithmImpl)
        assert isinstance(get_algorithm(" xxh128 "), XXHash128AlgorithmImpl)

    def test_unknown_algorithm_rejected(self):
        with pytest.raises(ValueError, match="Unknown hash algorithm"):
            get_algorithm("md5")
