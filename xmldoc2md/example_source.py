"""Lookup of hand-written example snippets stored next to the docs."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class ExampleSource:
    """Reads ``<identifier>.md`` files from an examples directory."""

    def __init__(self, directory: str | Path | None) -> None:
        """Initialize with the examples directory, or None to disable examples."""
        self.directory = Path(directory) if directory else None

    def path_for(self, identifier: str) -> Path | None:
        """Return the example file path for a documentation identifier."""
        if self.directory is None:
            return None
        return self.directory / f"{identifier}.md"

    def try_read(self, identifier: str) -> str | None:
        """Return the example text, or None when there is none."""
        path = self.path_for(identifier)
        if path is None or not path.is_file():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read example %s: %s", path, e)
            return None
