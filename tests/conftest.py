"""Pytest configuration and fixtures"""

import textwrap

import pytest

from template_forge.models.template import FieldSpec, TemplateSchema


@pytest.fixture(autouse=True)
def test_env(tmp_path, monkeypatch):
    """Keep settings independent of the developer's environment and .env file"""
    for var in ("TEMPLATES_DIR", "LOG_LEVEL", "UNRESOLVED_MARKER", "LIST_SEPARATOR"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)

    yield


@pytest.fixture
def status_schema():
    """One required enum field, as used throughout the examples"""
    return TemplateSchema(
        name="status",
        fields=(
            FieldSpec(name="status", kind="enum", allowed_values=["draft", "review", "published"]),
        ),
        template_body="Status: {{status}}",
    )


@pytest.fixture
def doc_schema():
    """A schema covering every field kind"""
    return TemplateSchema(
        name="doc",
        fields=(
            FieldSpec(name="title"),
            FieldSpec(name="status", kind="enum", allowed_values=["draft", "review", "published"]),
            FieldSpec(name="version", kind="number"),
            FieldSpec(name="public", kind="boolean", required=False, default_value=False),
            FieldSpec(name="tags", kind="list-of-string", required=False),
            FieldSpec(name="updated", kind="date", required=False),
            FieldSpec(name="owner", required=False),
        ),
        template_body=(
            "# {{title}}\n"
            "status={{status}} version={{version}} public={{public}}\n"
            "tags={{tags}} updated={{updated}} owner={{owner}}\n"
        ),
    )


def write_template(directory, filename, text):
    path = directory / filename
    path.write_text(textwrap.dedent(text).lstrip(), encoding="utf-8")
    return path


@pytest.fixture
def templates_dir(tmp_path):
    """A template directory with a status template and a release-notes template"""
    directory = tmp_path / "templates"
    directory.mkdir()

    write_template(directory, "status.md", """
        ---
        name: status
        title: Status page
        fields:
          status:
            allowed_values: "draft | review | published"
        ---
        Status: {{status}}
    """)

    write_template(directory, "release.md", """
        ---
        name: release
        title: Release notes
        fields:
          version:
            kind: number
          date:
            kind: date
          highlights:
            kind: list-of-string
          owner:
            required: false
        ---
        Release {{version}} ({{date}})

        Highlights: {{highlights}}
        Owner: {{owner}}
    """)

    return directory


@pytest.fixture
def make_template(tmp_path):
    """Write a template file into a fresh directory and return its path"""
    directory = tmp_path / "custom"
    directory.mkdir(exist_ok=True)

    def _make(filename, text):
        return write_template(directory, filename, text)

    return _make
