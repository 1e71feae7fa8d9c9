"""Main orchestration script: optional development checks, then a member sort."""

import argparse
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path


def run_command(cmd_list: Sequence[str | Path], cwd: Path | str | None = None) -> int:
    """Run a command and exit if it fails with an error status."""
    cmd_str = " ".join(str(x) for x in cmd_list)
    print(f"Running: {cmd_str}")
    completed = subprocess.run(cmd_list, check=False, cwd=cwd)
    # Status 1 from the sorter only means "--check found unsorted files".
    if completed.returncode > 1:
        print(f"Error executing command: {cmd_str}")
        sys.exit(completed.returncode)
    return completed.returncode


def main() -> None:
    """Run the sorter over the given files, optionally after the dev checks."""
    parser = argparse.ArgumentParser(
        description="Sort class members in source files.",
    )
    parser.add_argument(
        "files",
        nargs="+",
        help="Source files to sort",
    )
    parser.add_argument(
        "--dev",
        action="store_true",
        help="Run development checks (linting, tests) before sorting",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only report files that would change",
    )
    parser.add_argument(
        "--config",
        help="Path to configuration file",
    )
    args = parser.parse_args()

    root_dir = Path(__file__).parent

    if args.dev:
        print("--- Running Development Checks ---")
        run_command([sys.executable, str(root_dir / "dev.py"), "--ci"])
        print("\nDevelopment checks passed. Proceeding with sorting.\n")

    cmd = [sys.executable, "-m", "member_sorter.cli", *args.files]
    if args.check:
        cmd.append("--check")
    if args.config:
        cmd.extend(["--config", args.config])

    sys.exit(run_command(cmd))


if __name__ == "__main__":
    main()
