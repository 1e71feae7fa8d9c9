"""Development script to run checks (formatting, linting, types, tests)."""

import argparse
import subprocess
import sys

SOURCES = ["member_sorter", "tests", "main.py", "dev.py"]


def run_command(command: list[str], step_name: str) -> None:
    """Run a shell command as a step in the development process."""
    print(f"\n--- Running Step: {step_name} ---")
    print(f"$ {' '.join(command)}")
    try:
        subprocess.run(command, check=True)
    except subprocess.CalledProcessError:
        print(f"\nFailed: {step_name}")
        sys.exit(1)


def main() -> None:
    """Run the development checks, fixing what can be fixed unless --ci is set."""
    parser = argparse.ArgumentParser(description="Run development checks.")
    parser.add_argument(
        "--ci", action="store_true", help="Only verify; do not reformat or auto-fix"
    )
    args = parser.parse_args()

    if args.ci:
        run_command(["uv", "run", "ruff", "format", "--check", *SOURCES], "Ruff Format")
        run_command(["uv", "run", "ruff", "check", *SOURCES], "Ruff Lint")
    else:
        run_command(["uv", "run", "ruff", "format", *SOURCES], "Ruff Formatting")
        run_command(
            ["uv", "run", "ruff", "check", "--fix", *SOURCES],
            "Ruff Linting & Fixes",
        )

    run_command(["uv", "run", "mypy", "member_sorter"], "Mypy")
    run_command(["uv", "run", "pytest", "-q"], "Pytest")

    print("\nAll development checks passed successfully.")


if __name__ == "__main__":
    main()
