"""Template manager for loading and rendering Jinja2 prompt templates.

Provides a centralized interface for rendering documentation prompts
from Jinja2 templates stored in the package's templates/ directory.
"""

import logging
from pathlib import Path
from typing import Any, Optional

from jinja2 import Environment, FileSystemLoader

logger = logging.getLogger(__name__)

_DEFAULT_TEMPLATES_DIR = Path(__file__).parent.parent / "templates"


class TemplateManager:
    """Loads and renders Jinja2 prompt templates for documentation generation."""

    def __init__(self, templates_dir: Optional[str] = None) -> None:
        """Initialize the template manager.

        Args:
            templates_dir: Path to the templates directory. Uses the
                bundled templates/ directory if not specified.
        """
        self._templates_path = (
            Path(templates_dir) if templates_dir else _DEFAULT_TEMPLATES_DIR
        )

        if not self._templates_path.exists():
            logger.warning("Templates directory not found: %s", self._templates_path)

        self._env = Environment(
            loader=FileSystemLoader(str(self._templates_path)),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        logger.debug("Template manager initialized with: %s", self._templates_path)

    def render_file_doc_prompt(
        self,
        relative_path: str,
        content: str,
        language: str = "JavaScript",
    ) -> str:
        """Render the documentation prompt for a single source file.

        Args:
            relative_path: File path relative to the documented folder.
            content: Full text of the file, included verbatim.
            language: Language label used in the instruction line.

        Returns:
            Rendered prompt string ready for LLM submission.
        """
        return self._render(
            "file_doc.j2",
            relative_path=relative_path,
            content=content,
            language=language,
        )

    def _render(self, template_name: str, **kwargs: Any) -> str:
        """Render a template with the given context variables.

        Raises:
            TemplateNotFound: If the template file does not exist.
        """
        template = self._env.get_template(template_name)
        rendered = template.render(**kwargs)
        logger.debug("Rendered template %s (%d chars)", template_name, len(rendered))
        return rendered

    def list_templates(self) -> list[str]:
        """List all available template files."""
        return self._env.list_templates()
