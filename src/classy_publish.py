"""Publish documentation-comment symbol records as a linked HTML site.

This module reads the explain dump of a documentation-comment extractor
(``jsdoc -X``) as JSON or YAML, resolves inherited documentation and
generic types, and writes one HTML page per container alongside a main
page, a globals page, source file pages and tutorials.
"""

import argparse
import logging
from pathlib import Path

from src.run_publish import run_publish


def main() -> int:
    """Run the publishing process."""
    ap = argparse.ArgumentParser(
        description="Render extracted symbol records into a linked HTML documentation site.",
    )
    ap.add_argument(
        "records",
        type=Path,
        help="Record file (JSON/YAML), or a directory searched for them",
    )
    ap.add_argument(
        "out_dir",
        type=Path,
        help="Output directory for the generated HTML pages",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML or JSON configuration file",
    )
    ap.add_argument(
        "--api-entry",
        help="Longname of the class or namespace documented on the index page",
    )
    ap.add_argument(
        "--readme",
        type=Path,
        help="HTML readme used as the index page content",
    )
    ap.add_argument(
        "--tutorials",
        type=Path,
        help="Directory of HTML tutorials (with an optional tutorials.yml)",
    )
    ap.add_argument(
        "--private",
        action="store_true",
        help="Also publish records with private access",
    )
    ap.add_argument(
        "--no-source-files",
        action="store_true",
        help="Do not generate pages for source files",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug messages",
    )
    args = ap.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_publish(args)


if __name__ == "__main__":
    raise SystemExit(main())
