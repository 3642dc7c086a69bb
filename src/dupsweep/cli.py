#!/usr/bin/env python3
"""
dupsweep CLI: command line interface for duplicate file detection and removal.
Runs the same core engine as the API layer, with console-based interaction.
All operations are safe: deletion moves files to system trash, never permanent erase.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import json
import logging
import os
import sys
import time
from typing import List, NoReturn, Optional

logging.basicConfig(
    level=logging.ERROR,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

from dupsweep.aliases import (
    ALGORITHM_CHOICES, ALGORITHM_HELP_TEXT,
    SCAN_MODE_CHOICES, SCAN_MODE_HELP_TEXT, scan_mode_arg,
    EPILOG_TEXT
)
from dupsweep.commands import DuplicateScanCommand
from dupsweep.core.errors import DupSweepError
from dupsweep.core.models import DuplicateGroup, PreviewKind, ScanParams, ScanMode
from dupsweep.core.preview import PreviewResolver
from dupsweep.services.duplicate_service import DuplicateService
from dupsweep.services.file_service import FileService
from dupsweep.utils.convert_utils import ConvertUtils


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="dupsweep",
            description="dupsweep: duplicate file finder with safe deletion",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        parser.add_argument(
            "--input", "-i",
            type=str,
            help="Directory to scan for duplicates"
        )
        parser.add_argument(
            "--mode",
            default=ScanMode.STRICT,
            type=scan_mode_arg,
            metavar="{" + ",".join(SCAN_MODE_CHOICES) + "}",
            help=SCAN_MODE_HELP_TEXT
        )
        parser.add_argument(
            "--recursive", "-r",
            action="store_true",
            help="Also scan subdirectories (system trash folders are skipped)"
        )
        parser.add_argument(
            "--algorithm",
            choices=ALGORITHM_CHOICES,
            default="sha256",
            type=str,
            help=ALGORITHM_HELP_TEXT
        )
        parser.add_argument(
            "--workers", "-w",
            default=1,
            type=int,
            metavar='',
            help="Parallel hashing threads in strict mode. Default: 1"
        )

        # Actions
        parser.add_argument(
            "--preview",
            type=str,
            metavar='FILE',
            help="Show a preview of FILE (image, text or unsupported) and exit"
        )
        parser.add_argument(
            "--keep-one",
            action="store_true",
            help="Keep the first file of each duplicate group and move the rest to trash. "
                 "Always shows a plan before deletion for safety."
        )

        # Output options
        parser.add_argument(
            "--force",
            action="store_true",
            help="Skip confirmation prompt when used with --keep-one (for automation/scripts)"
        )
        parser.add_argument(
            "--allow-unverified",
            action="store_true",
            help="Allow --keep-one in fast mode, where group members may differ in content"
        )
        parser.add_argument(
            "--json",
            action="store_true",
            help="Print results as JSON"
        )
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Suppress non-essential output"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show statistics and debug logging"
        )

        return parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before execution."""
        if not args.input and not args.preview:
            self.error_exit("Either --input or --preview is required")

        if args.force and not args.keep_one:
            self.error_exit("--force can only be used with --keep-one")

        if args.workers < 1:
            self.error_exit("--workers must be at least 1")

        if args.allow_unverified and not args.keep_one:
            self.error_exit("--allow-unverified can only be used with --keep-one")

        # Fast mode groups by size alone; deleting from them can lose unique content
        if args.keep_one and args.mode == ScanMode.FAST and not args.allow_unverified:
            self.error_exit(
                "--keep-one in fast mode may trash files whose content differs from the kept one.\n"
                "Use --mode strict, or add --allow-unverified to proceed anyway."
            )

        # Prevent interactive confirmation in non-TTY environments
        if args.keep_one and not args.force:
            if not sys.stdin.isatty() or not sys.stdout.isatty():
                self.error_exit(
                    "Cannot request interactive confirmation in non-interactive session.\n"
                    "Use --force flag to proceed without confirmation when piping output or running in scripts."
                )

    def create_params(self, args: argparse.Namespace) -> ScanParams:
        """Create ScanParams from CLI arguments."""
        try:
            return ScanParams(
                root_dir=os.path.abspath(args.input),
                mode=args.mode,
                recursive=args.recursive,
                algorithm=args.algorithm,
                workers=args.workers,
            )
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    def progress_callback(self, stage: str, current: int, total: Optional[int]) -> None:
        """CLI progress callback - shows progress in console."""
        if not self.verbose:
            return

        if total and total > 0:
            percent = (current / total) * 100
            sys.stderr.write(f"\r  [{stage}] {current}/{total} ({percent:.1f}%)")
        else:
            sys.stderr.write(f"\r  [{stage}] {current} files found...")
        sys.stderr.flush()

    def run_scan(self, params: ScanParams) -> List[DuplicateGroup]:
        """Execute the scan workflow."""
        if self.verbose:
            print(f"Finding duplicates (mode: {params.mode.display_name})...")

        try:
            groups, stats = DuplicateScanCommand().execute(
                params,
                progress_callback=self.progress_callback if self.verbose else None,
            )
        except DupSweepError as e:
            self.error_exit(str(e))

        if self.verbose:
            sys.stderr.write("\n")
            print(stats.print_summary())

        return groups

    def output_results(self, groups: List[DuplicateGroup], params: ScanParams, as_json: bool = False) -> None:
        """Output duplicate groups in pipeline order (largest size first)."""
        if as_json:
            print(json.dumps([g.to_dict() for g in groups], indent=2, ensure_ascii=False))
            return

        if self.quiet:
            return

        if not groups:
            print("No duplicate groups found.")
            return

        summary = DuplicateService.summarize(groups)
        print(f"\nFound {summary['groups']} duplicate groups ({summary['files']} files)")
        if params.mode == ScanMode.FAST:
            print("⚠️  Fast mode: groups share a size only, content was not compared.")

        for idx, group in enumerate(groups, 1):
            size_str = ConvertUtils.bytes_to_human(group.size)
            key = ConvertUtils.shorten_digest(group.group_key)
            print(f"\n📁 Group {idx} | Size: {size_str} | Files: {len(group.files)} | Key: {key}")
            for file in group.files:
                print(f"   {file.path}")

        print(f"\nReclaimable space: {ConvertUtils.bytes_to_human(summary['reclaimable_bytes'])}")

    def output_preview(self, file_path: str, as_json: bool = False) -> None:
        try:
            payload = PreviewResolver().preview(file_path)
        except DupSweepError as e:
            self.error_exit(str(e))

        if as_json:
            print(json.dumps(payload.to_dict(), indent=2, ensure_ascii=False))
        elif payload.kind == PreviewKind.IMAGE:
            print(f"🖼  Image preview ({len(payload.content)} characters of data URI)")
            print(payload.content[:80] + ("..." if len(payload.content) > 80 else ""))
        else:
            print(payload.content)

    def execute_keep_one(self, groups: List[DuplicateGroup], params: ScanParams, force: bool = False) -> None:
        """Keep one file per group, trash the rest. Always shows the plan before deletion."""
        if not groups:
            if not self.quiet:
                print("No duplicate groups found.")
            return

        if params.mode == ScanMode.FAST:
            self.warning("Fast mode groups were not content-verified: files marked [DEL] may differ from the kept file.")

        files_to_delete = DuplicateService.select_all_but_one(groups)
        space_saved_str = ConvertUtils.bytes_to_human(DuplicateService.summarize(groups)["reclaimable_bytes"])

        print()
        for idx, group in enumerate(groups, 1):
            size_str = ConvertUtils.bytes_to_human(group.size)
            print(f"📁 Group {idx} | Size: {size_str} | Files: {len(group.files)}")
            print("-" * 60)
            print(f"   [KEEP] {group.files[0].path}")
            for file in group.files[1:]:
                print(f"   [DEL]  {file.path}")
            print()

        print("=" * 60)
        print(f"Summary: Keep 1 file per group ({len(groups)} files preserved, {len(files_to_delete)} files deleted)")
        print(f"Total space saved: {space_saved_str}")
        print()

        if force:
            print("⚠️  WARNING: --force flag skips confirmation. Proceeding with deletion...")
        else:
            response = input(f"Are you sure you want to move {len(files_to_delete)} files to trash? [y/N]: ")
            if response.strip().lower() not in ("y", "yes"):
                print("Deletion cancelled by user.")
                return

        print(f"\nMoving {len(files_to_delete)} files to trash...")
        outcome = FileService.move_multiple_to_trash(files_to_delete)

        if outcome.has_failures:
            print(f"\n⚠️  Partial success: {len(outcome.deleted)}/{len(files_to_delete)} files moved to trash.")
            print(f"Failed to delete {len(outcome.failures)} file(s):")
            for failure in outcome.failures[:5]:
                print(f"  • {os.path.basename(failure.path)}: {failure.reason}")
            if len(outcome.failures) > 5:
                print(f"  ...and {len(outcome.failures) - 5} more files")
        else:
            print(f"✅ Successfully moved {len(outcome.deleted)} files to trash.")

        remaining = DuplicateService.remove_files_from_groups(groups, outcome.deleted)
        if remaining and not self.quiet:
            print(f"{len(remaining)} duplicate group(s) still contain 2+ files.")

    def warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        if not self.quiet:
            print(f"⚠️  {message}", file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv=None) -> None:
        """Main entry point with conditional output behavior."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet
        if self.verbose:
            logging.getLogger("dupsweep").setLevel(logging.DEBUG)

        self.validate_args(args)

        if args.preview:
            self.output_preview(args.preview, as_json=args.json)
            return

        params = self.create_params(args)

        if not self.quiet and not args.json:
            print(f"Scanning directory: {params.root_dir}")

        groups = self.run_scan(params)

        if args.keep_one:
            self.execute_keep_one(groups, params=params, force=args.force)
        else:
            self.output_results(groups, params, as_json=args.json)

        elapsed = time.time() - self.start_time
        if self.verbose:
            print(f"\n✅ Completed in {elapsed:.2f} seconds")


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)")
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
