"""
Tests for display conversion utilities used by CLI output.
"""
from dupsweep.utils.convert_utils import ConvertUtils


class TestBytesToHuman:
    """Test conversion from bytes to human-readable strings."""

    def test_small_sizes_stay_in_bytes(self):
        assert ConvertUtils.bytes_to_human(0) == "0B"
        assert ConvertUtils.bytes_to_human(21) == "21B"
        assert ConvertUtils.bytes_to_human(1023) == "1023B"

    def test_kilobytes(self):
        assert ConvertUtils.bytes_to_human(1024) == "1.00KB"
        assert ConvertUtils.bytes_to_human(1536) == "1.50KB"

    def test_megabytes_and_up(self):
        assert ConvertUtils.bytes_to_human(5 * 1024 * 1024) == "5.00MB"
        assert ConvertUtils.bytes_to_human(3 * 1024 ** 3) == "3.00GB"

    def test_negative_is_zero(self):
        assert ConvertUtils.bytes_to_human(-5) == "0B"


class TestShortenDigest:

    def test_long_digest_truncated(self):
        digest = "a" * 64
        assert ConvertUtils.shorten_digest(digest) == "a" * 12
        assert ConvertUtils.shorten_digest(digest, length=8) == "a" * 8

    def test_size_token_untouched(self):
        assert ConvertUtils.shorten_digest("size_123456789012345") == "size_123456789012345"

    def test_short_digest_untouched(self):
        assert ConvertUtils.shorten_digest("abc") == "abc"
