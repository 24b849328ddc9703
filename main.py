"""Main orchestration script for extracting symbol records and publishing HTML docs."""

import argparse
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path


def run_command(
    cmd_list: Sequence[str | Path],
    cwd: Path | str | None = None,
    stdout_path: Path | None = None,
) -> None:
    """Run a command and exit if it fails, optionally capturing stdout to a file."""
    cmd_str = " ".join(str(x) for x in cmd_list)
    print(f"Running: {cmd_str}")
    try:
        if stdout_path is None:
            subprocess.run(cmd_list, check=True, cwd=cwd)
        else:
            with stdout_path.open("w", encoding="utf-8") as out:
                subprocess.run(cmd_list, check=True, cwd=cwd, stdout=out)
    except subprocess.CalledProcessError as e:
        print(f"Error executing command: {cmd_str}")
        sys.exit(e.returncode)


def main() -> None:
    """Run the full documentation generation pipeline."""
    parser = argparse.ArgumentParser(
        description="Extract symbol records with jsdoc and publish them as HTML."
    )
    parser.add_argument(
        "sources",
        nargs="+",
        help="Source files or directories passed to jsdoc",
    )
    parser.add_argument(
        "--config",
        help="Path to configuration file",
    )
    parser.add_argument(
        "--api-entry",
        help="Longname of the class or namespace documented on the index page",
    )
    parser.add_argument(
        "--readme",
        help="HTML readme used as the index page content",
    )
    parser.add_argument(
        "--tutorials",
        help="Directory of HTML tutorials",
    )
    parser.add_argument(
        "--private",
        action="store_true",
        help="Also publish private records",
    )
    args = parser.parse_args()

    root_dir = Path(__file__).parent
    records_file = root_dir / "records.json"
    out_dir = root_dir / "docs_out"

    # 1. Dump symbol records using jsdoc's explain mode
    print("--- Step 1: Extracting symbol records ---")
    run_command(["jsdoc", "-X", "-r", *args.sources], stdout_path=records_file)

    # 2. Render records to HTML
    print("\n--- Step 2: Publishing HTML pages ---")
    cmd = [
        sys.executable,
        "-m",
        "src.classy_publish",
        str(records_file),
        str(out_dir),
    ]
    if args.config:
        cmd.extend(["--config", args.config])
    if args.api_entry:
        cmd.extend(["--api-entry", args.api_entry])
    if args.readme:
        cmd.extend(["--readme", args.readme])
    if args.tutorials:
        cmd.extend(["--tutorials", args.tutorials])
    if args.private:
        cmd.append("--private")

    run_command(cmd)

    print(f"\nSUCCESS: Documentation generated in {out_dir}")


if __name__ == "__main__":
    main()
