"""
Lint script runner.

Runs flake8 and pylint over the interpreter package and the `scl` entry
point. Tests are left out; they lean on pytest fixtures that pylint reports
as unused arguments.
"""
import argparse
import os
import subprocess

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

TARGETS = ["scopelang", "scl.py", "scripts"]
MAX_LINE_LENGTH = "100"

TOOLS = {
    "flake8": [
        "flake8",
        *TARGETS,
        f"--max-line-length={MAX_LINE_LENGTH}",
        "--exclude=scopelang/tests",
    ],
    "pylint": [
        "pylint",
        *TARGETS,
        f"--max-line-length={MAX_LINE_LENGTH}",
        "--ignore=tests",
    ],
}


def main():
    """
    Lint the scopelang project.
    """
    parser = argparse.ArgumentParser(description="Lint scopelang.")
    parser.add_argument(
        "--only",
        action="append",
        choices=sorted(TOOLS),
        help="Run just this linter; may be repeated (default: all).",
    )
    args = parser.parse_args()

    for tool in args.only or TOOLS:
        print(f"Running {tool}...")
        subprocess.run(TOOLS[tool], cwd=BASE_DIR, check=True)


if __name__ == "__main__":
    main()
