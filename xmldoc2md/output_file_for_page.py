"""Utility for mapping a page path to the Markdown file it is written to."""

from pathlib import Path

PAGE_EXTENSION = ".md"


def output_file_for_page(out_root: Path, page_path: str) -> Path:
    """Return ``out_root/<folders>/<page>.md`` and create its folders.

    Page paths use ``/`` between namespace folders, whatever the platform.
    Dots stay part of the page name (``mylib.foo`` -> ``mylib.foo.md``).
    """
    parts = [p for p in page_path.split("/") if p]
    if not parts:
        msg = f"Empty page path: {page_path!r}"
        raise ValueError(msg)
    *folders, page = parts
    directory = out_root.joinpath(*folders)
    directory.mkdir(parents=True, exist_ok=True)
    return directory / f"{page}{PAGE_EXTENSION}"
