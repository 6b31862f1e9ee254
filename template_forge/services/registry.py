"""Directory-backed registry of templates"""

import logging
from pathlib import Path
from typing import Dict, List, Optional

from template_forge.models.template import TemplateError, TemplateSchema
from template_forge.services.loader import TemplateLoader
from template_forge.utils.config import get_settings

logger = logging.getLogger(__name__)


class TemplateRegistry:
    """Loads every *.md template in a directory, keyed by template name"""

    def __init__(self, templates_dir: Optional[str] = None, loader: Optional[TemplateLoader] = None):
        self.templates_dir = Path(templates_dir or get_settings().templates_dir)
        self.loader = loader or TemplateLoader()
        self._templates: Dict[str, TemplateSchema] = {}
        self.errors: List[str] = []
        self._load_templates()

    def _load_templates(self):
        """Load all templates from Markdown files"""
        if not self.templates_dir.is_dir():
            logger.warning(f"Templates directory not found: {self.templates_dir}")
            return

        for template_file in sorted(self.templates_dir.glob("*.md")):
            try:
                template = self.loader.load_file(template_file)
            except TemplateError as e:
                logger.warning(f"Error loading template {template_file}: {e}")
                self.errors.append(f"{template_file.name}: {e}")
                continue

            if template.name in self._templates:
                message = f"duplicate template name '{template.name}'"
                logger.warning(f"Skipping {template_file}: {message}")
                self.errors.append(f"{template_file.name}: {message}")
                continue

            self._templates[template.name] = template

        logger.info(f"Loaded {len(self._templates)} template(s) from {self.templates_dir}")

    def list_templates(self) -> List[TemplateSchema]:
        """List available templates, sorted by name"""
        return [self._templates[name] for name in sorted(self._templates)]

    def get_template(self, name: str) -> Optional[TemplateSchema]:
        """Get a specific template by name"""
        return self._templates.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self._templates

    def __len__(self) -> int:
        return len(self._templates)
