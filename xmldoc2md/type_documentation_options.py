"""Options controlling how a type page is assembled."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass
class TypeDocumentationOptions:
    """Page layout and link options for a type page."""

    structure: str = "flat"  # flat | tree
    back_button: bool = False
    examples_directory: Path | None = None
    github_pages: bool = False
    gitlab_wiki: bool = False
    member_accessibility_level: str = "protected"
    language: str = "csharp"

    @property
    def no_extension(self) -> bool:
        """Links omit the ``.md`` extension on wiki-style hosts."""
        return self.github_pages or self.gitlab_wiki

    @property
    def no_prefix(self) -> bool:
        """Links omit the leading ``./`` on GitLab wikis."""
        return self.gitlab_wiki

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "TypeDocumentationOptions":
        """Build options from a merged configuration mapping."""
        output = config.get("output") or {}
        page = config.get("page") or {}
        members = config.get("members") or {}
        examples = page.get("examples_directory")
        return cls(
            structure=str(output.get("structure") or "flat"),
            back_button=bool(page.get("back_button", False)),
            examples_directory=Path(examples) if examples else None,
            github_pages=bool(output.get("github_pages", False)),
            gitlab_wiki=bool(output.get("gitlab_wiki", False)),
            member_accessibility_level=str(members.get("accessibility") or "protected"),
            language=str(page.get("language") or "csharp"),
        )
