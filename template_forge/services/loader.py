"""Template loader: Markdown files with YAML front matter to TemplateSchema"""

import logging
from pathlib import Path
from typing import Any, Dict, List

import frontmatter
import yaml
from pydantic import ValidationError

from template_forge.models.template import (
    FieldKind,
    FieldSpec,
    SchemaError,
    TemplateLoadError,
    TemplateSchema,
)

logger = logging.getLogger(__name__)

# Front matter spellings accepted for field keys
FIELD_KEY_ALIASES = {
    "type": "kind",
    "enum": "allowed_values",
    "values": "allowed_values",
    "default": "default_value",
}


class TemplateLoader:
    """
    Builds template schemas from front-matter documents.

    Expected layout::

        ---
        name: adr
        title: Architecture Decision Record
        fields:
          title: {kind: string, label: Decision title}
          status: {allowed_values: "proposed | accepted | superseded"}
          date: {kind: date, required: false}
        ---
        # {{title}}

    ``fields`` may also be a list of mappings that each carry a ``name``.
    """

    def load_file(self, path: "str | Path") -> TemplateSchema:
        """
        Load a template from a Markdown file.

        Args:
            path: Path to the template file

        Returns:
            TemplateSchema

        Raises:
            TemplateLoadError: If the file is missing or its front matter is unreadable
            SchemaError: If the declared schema is inconsistent
        """
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise TemplateLoadError(f"Template file not found: {path}")
        except (OSError, UnicodeDecodeError) as e:
            raise TemplateLoadError(f"Cannot read template {path}: {e}")

        return self.loads(text, default_name=path.stem)

    def loads(self, text: str, default_name: str = "template") -> TemplateSchema:
        """Load a template from front-matter text"""
        try:
            post = frontmatter.loads(text)
        except yaml.YAMLError as e:
            raise TemplateLoadError(f"Invalid YAML front matter in '{default_name}': {e}")

        metadata = post.metadata or {}
        if not isinstance(metadata, dict):
            raise TemplateLoadError(f"Front matter of '{default_name}' must be a mapping")

        return self.from_definition(metadata, post.content, default_name=default_name)

    def from_definition(
        self,
        metadata: Dict[str, Any],
        body: str,
        default_name: str = "template",
    ) -> TemplateSchema:
        """
        Build a schema from already-parsed front matter and a body.

        Raises:
            SchemaError: If the definition is inconsistent or malformed
        """
        name = str(metadata.get("name") or default_name)
        fields = [self._build_field(d) for d in self._field_definitions(name, metadata.get("fields"))]

        try:
            schema = TemplateSchema(
                name=name,
                title=metadata.get("title"),
                description=metadata.get("description"),
                fields=tuple(fields),
                template_body=body,
            )
        except ValidationError as e:
            raise SchemaError(f"Invalid template '{name}': {e}") from e

        logger.debug(f"Loaded template '{name}' with {len(fields)} field(s)")
        return schema

    def _field_definitions(self, template_name: str, raw: Any) -> List[Dict[str, Any]]:
        if raw is None:
            return []

        if isinstance(raw, dict):
            definitions = []
            for field_name, definition in raw.items():
                if definition is None:
                    definition = {}
                elif isinstance(definition, str):
                    definition = {"kind": definition}
                elif not isinstance(definition, dict):
                    raise SchemaError(
                        f"Field '{field_name}' of template '{template_name}' must be a mapping or a kind name"
                    )
                definitions.append({**definition, "name": field_name})
            return definitions

        if isinstance(raw, list):
            for definition in raw:
                if not isinstance(definition, dict) or "name" not in definition:
                    raise SchemaError(
                        f"Every field of template '{template_name}' must be a mapping with a name"
                    )
            return [dict(d) for d in raw]

        raise SchemaError(f"'fields' of template '{template_name}' must be a list or a mapping")

    def _build_field(self, definition: Dict[str, Any]) -> FieldSpec:
        data = {FIELD_KEY_ALIASES.get(key, key): value for key, value in definition.items()}
        data["name"] = str(data["name"])

        allowed = data.get("allowed_values")
        if isinstance(allowed, str):
            # Choices may be written inline as "draft | review | published"
            data["allowed_values"] = [v.strip() for v in allowed.split("|") if v.strip()]
        elif isinstance(allowed, list):
            data["allowed_values"] = [str(v) for v in allowed]

        if "kind" not in data and data.get("allowed_values") is not None:
            data["kind"] = FieldKind.ENUM

        try:
            return FieldSpec(**data)
        except ValidationError as e:
            raise SchemaError(f"Invalid field '{data['name']}': {e}") from e


def load_template(path: "str | Path") -> TemplateSchema:
    """Convenience function to load a single template file"""
    return TemplateLoader().load_file(path)
