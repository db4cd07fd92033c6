"""Convert .NET type metadata and XML documentation comments to Markdown.

Reads a YAML metadata dump describing the types of an assembly together
with the compiler-generated XML documentation file, and writes one Markdown
page per type plus an index page.
"""

import argparse
import logging
from pathlib import Path

from xmldoc2md.member_policy import ACCESSIBILITY_LEVELS
from xmldoc2md.run_conversion import run_conversion


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser."""
    ap = argparse.ArgumentParser(
        description="Convert .NET metadata and XML documentation to Markdown.",
    )
    ap.add_argument(
        "metadata",
        type=Path,
        help="YAML metadata dump describing the assembly's types",
    )
    ap.add_argument(
        "xmldoc",
        type=Path,
        help="XML documentation file generated by the compiler",
    )
    ap.add_argument(
        "out_dir",
        type=Path,
        help="Output directory for the generated Markdown pages",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file",
    )
    ap.add_argument(
        "--structure",
        choices=["flat", "tree"],
        help="Page layout: one folder (flat) or one folder per namespace (tree)",
    )
    ap.add_argument(
        "--back-button",
        action="store_true",
        help="Add a back link at the top and bottom of each page",
    )
    ap.add_argument(
        "--examples",
        type=Path,
        help="Directory of <identifier>.md example files",
    )
    ap.add_argument(
        "--github-pages",
        action="store_true",
        help="Omit the .md extension in links (GitHub Pages)",
    )
    ap.add_argument(
        "--gitlab-wiki",
        action="store_true",
        help="Omit the .md extension and ./ prefix in links (GitLab wiki)",
    )
    ap.add_argument(
        "--member-accessibility",
        choices=list(ACCESSIBILITY_LEVELS),
        help="Minimum accessibility of documented members (default: protected)",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log each type and member as it is written",
    )
    return ap


def main(argv: list[str] | None = None) -> int:
    """Run the conversion process."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(message)s",
    )
    return run_conversion(args)


if __name__ == "__main__":
    raise SystemExit(main())
