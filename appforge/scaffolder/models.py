"""Pydantic v2 models for scaffolding input and output.

``AppSpec`` is the single input shared by all four artifact generators.
``ProjectBundle`` is the four-layer output. File paths are POSIX-relative and
are the contract a downstream packager must honour verbatim.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


TYPESCRIPT = "TypeScript"
JAVASCRIPT = "JavaScript"


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------


class AppSpec(BaseModel):
    """The app to scaffold.

    ``language`` is compared to ``"TypeScript"`` by equality; any other value
    (including typos) produces JavaScript output without complaint.
    """

    name: str = Field(..., description="Human-readable app name, e.g. 'My App'")
    description: str = Field(default="")
    language: str = Field(default=TYPESCRIPT, description="'TypeScript' or 'JavaScript'")

    @property
    def is_typescript(self) -> bool:
        return self.language == TYPESCRIPT

    @property
    def component_ext(self) -> str:
        """Extension for React component files."""
        return "tsx" if self.is_typescript else "jsx"

    @property
    def module_ext(self) -> str:
        """Extension for plain modules and tests."""
        return "ts" if self.is_typescript else "js"


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------


class GeneratedFile(BaseModel):
    """A single generated file."""

    path: str = Field(..., description="POSIX-relative path, e.g. 'src/App.tsx'")
    content: str


def _unique_paths(files: list[GeneratedFile]) -> list[GeneratedFile]:
    seen: set[str] = set()
    for f in files:
        if f.path in seen:
            raise ValueError(f"Duplicate file path in bundle: {f.path}")
        seen.add(f.path)
    return files


class CodeBundle(BaseModel):
    """Application source files plus test files."""

    name: str
    files: list[GeneratedFile] = Field(default_factory=list)
    tests: list[GeneratedFile] = Field(default_factory=list)

    @field_validator("files", "tests")
    @classmethod
    def check_unique_paths(cls, files: list[GeneratedFile]) -> list[GeneratedFile]:
        return _unique_paths(files)

    def all_files(self) -> list[GeneratedFile]:
        return [*self.files, *self.tests]


class DbBundle(BaseModel):
    """Database schema text and migration files.

    The schema is exposed as ``schema_text`` in Python (``schema`` is taken
    by ``BaseModel``) and serialised under the key ``schema``.
    """

    model_config = ConfigDict(populate_by_name=True)

    schema_text: str = Field(..., alias="schema")
    migrations: list[GeneratedFile] = Field(default_factory=list)

    @field_validator("migrations")
    @classmethod
    def check_unique_paths(cls, files: list[GeneratedFile]) -> list[GeneratedFile]:
        return _unique_paths(files)

    def all_files(self) -> list[GeneratedFile]:
        return list(self.migrations)


class InfraBundle(BaseModel):
    """Container, CI and Terraform files."""

    dockerfiles: list[GeneratedFile] = Field(default_factory=list)
    ci: list[GeneratedFile] = Field(default_factory=list)
    terraform: list[GeneratedFile] = Field(default_factory=list)

    @field_validator("dockerfiles", "ci", "terraform")
    @classmethod
    def check_unique_paths(cls, files: list[GeneratedFile]) -> list[GeneratedFile]:
        return _unique_paths(files)

    def all_files(self) -> list[GeneratedFile]:
        return [*self.dockerfiles, *self.ci, *self.terraform]


class DocsBundle(BaseModel):
    """README, API reference and architecture diagram text."""

    readme: str
    api_docs: str = ""
    architecture: str = ""


class ProjectBundle(BaseModel):
    """Everything generated for one ``AppSpec``."""

    code: CodeBundle
    db: DbBundle
    infra: InfraBundle
    docs: DocsBundle

    def all_files(self) -> list[GeneratedFile]:
        """Flatten the file-carrying bundles in code, db, infra order."""
        return [*self.code.all_files(), *self.db.all_files(), *self.infra.all_files()]

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready form with the wire key names (``schema`` for the db schema)."""
        return self.model_dump(mode="json", by_alias=True)
