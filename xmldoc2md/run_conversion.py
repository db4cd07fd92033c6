"""Orchestration logic for converting metadata and XML docs to Markdown pages."""

import argparse
import logging
from pathlib import Path
from typing import Any

from xmldoc2md.link_builder import docs_file_name
from xmldoc2md.load_config import load_config
from xmldoc2md.load_metadata import load_metadata
from xmldoc2md.member_policy import MemberPolicy
from xmldoc2md.metadata_index import MetadataIndex
from xmldoc2md.output_file_for_page import output_file_for_page
from xmldoc2md.render_index_page import render_index_page
from xmldoc2md.type_descriptor import TypeDescriptor
from xmldoc2md.type_documentation import TypeDocumentation
from xmldoc2md.type_documentation_options import TypeDocumentationOptions
from xmldoc2md.xml_documentation import XmlDocumentation

logger = logging.getLogger(__name__)


def run_conversion(args: argparse.Namespace) -> int:
    """Execute the full conversion pipeline."""
    if not args.metadata.is_file():
        msg = f"Metadata file not found: {args.metadata}"
        raise SystemExit(msg)
    if not args.xmldoc.is_file():
        msg = f"XML documentation file not found: {args.xmldoc}"
        raise SystemExit(msg)

    config = _load_effective_config(args)
    options = TypeDocumentationOptions.from_config(config)

    index = load_metadata(args.metadata)
    documentation = XmlDocumentation.load(args.xmldoc)
    logger.info(
        "Loaded %d types and %d documented members", len(index), len(documentation)
    )

    policy = MemberPolicy(options.member_accessibility_level)
    types = [t for t in index.internal_types() if policy.include_type(t)]
    if not types:
        msg = f"No documentable types found in: {args.metadata}"
        raise SystemExit(msg)

    out_root = args.out_dir.resolve()
    out_root.mkdir(parents=True, exist_ok=True)

    written = write_type_pages(types, index, documentation, options, out_root)

    title = documentation.assembly_name or args.metadata.stem
    index_md = render_index_page(title, types, index, documentation, options)
    index_page = str(config["output"].get("index_page") or "index")
    output_file_for_page(out_root, index_page).write_text(index_md, encoding="utf-8")
    written += 1

    print(f"Generated {written} Markdown pages into: {out_root}")
    return 0


def write_type_pages(
    types: list[TypeDescriptor],
    index: MetadataIndex,
    documentation: XmlDocumentation,
    options: TypeDocumentationOptions,
    out_root: Path,
) -> int:
    """Write all type pages to disk."""
    written = 0
    total_types = len(types)
    print(f"Writing {total_types} type pages...")
    for t in types:
        logger.info("  %s", t.full_name)
        md = TypeDocumentation(index, t, documentation, options).render()
        page_path = docs_file_name(t, options.structure)
        out_file = output_file_for_page(out_root, page_path)
        out_file.write_text(md, encoding="utf-8")
        written += 1
        if written % 50 == 0:
            print(f"  ... wrote {written}/{total_types} types")
    return written


def _load_effective_config(args: argparse.Namespace) -> dict[str, Any]:
    """Load the configuration file and apply command-line overrides."""
    config = load_config(args.config)
    output = config["output"]
    page = config["page"]
    if args.structure:
        output["structure"] = args.structure
    if args.github_pages:
        output["github_pages"] = True
    if args.gitlab_wiki:
        output["gitlab_wiki"] = True
    if args.back_button:
        page["back_button"] = True
    if args.examples:
        page["examples_directory"] = str(args.examples)
    if args.member_accessibility:
        config["members"]["accessibility"] = args.member_accessibility
    return config
