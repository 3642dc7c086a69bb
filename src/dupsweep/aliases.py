import argparse

from dupsweep.core.hasher import ALGORITHMS
from dupsweep.core.models import MODE_ALIASES, ScanMode

SCAN_MODE_CHOICES = list(MODE_ALIASES.keys())

SCAN_MODE_HELP_TEXT = (
    "Scan mode (depth of analysis), case-insensitive:\n"
    "  fast      : Size only (no file reads, may report same-size files with different content)\n"
    "              aliases: size, size_only\n"
    "  strict    : Size → Full content hash (exact). Default\n"
    "              aliases: exact, full\n"
    "Example:\n"
    "  %(prog)s -i ~/Downloads --mode fast"
)


def scan_mode_arg(value: str) -> ScanMode:
    """argparse type for --mode; accepts every alias ScanMode.parse knows."""
    try:
        return ScanMode.parse(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


ALGORITHM_CHOICES = sorted(ALGORITHMS.keys())

ALGORITHM_HELP_TEXT = (
    "Content hash used in strict mode:\n"
    "  sha256 : Cryptographic SHA-256. Default\n"
    "  xxh128 : xxHash3 128-bit, faster, non-cryptographic\n"
)

EPILOG_TEXT = """
Examples:
  Find exact duplicates in the Downloads folder (top level only)
  %(prog)s -i ~/Downloads

  Quick size-only pass, including subfolders
  %(prog)s -i ~/Downloads --mode fast --recursive

  Same as the first + move all but one file per group to trash (with confirmation prompt)
  %(prog)s -i ~/Downloads --keep-one

  Machine-readable output for scripts
  %(prog)s -i ~/Downloads --json > ~/Downloads/report.json

  Preview a file listed in a group
  %(prog)s --preview ~/Downloads/notes.txt
"""
