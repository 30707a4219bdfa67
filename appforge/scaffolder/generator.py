"""Main scaffolding orchestrator.

Takes an ``AppSpec`` and runs the four independent artifact generators
(code, database, infrastructure, documentation) against it, assembling a
``ProjectBundle``. Nothing here is random: identical input produces
byte-identical output.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from appforge.config import Config
from appforge.utils import slugify

from .code_gen import CodeBundleGenerator
from .db_gen import DbGenerator
from .docs_gen import DocsGenerator
from .infra_gen import InfraGenerator
from .models import (
    TYPESCRIPT,
    AppSpec,
    CodeBundle,
    DbBundle,
    DocsBundle,
    InfraBundle,
    ProjectBundle,
)
from .templates import TemplateRenderer


class ArtifactGenerators:
    """Scaffolding entry point.

    All four generators share one ``TemplateRenderer``; they hold no other
    state, so one instance can serve concurrent callers.
    """

    def __init__(self, renderer: Optional[TemplateRenderer] = None) -> None:
        self.renderer = renderer if renderer is not None else TemplateRenderer()
        self.code_gen = CodeBundleGenerator(self.renderer)
        self.db_gen = DbGenerator(self.renderer)
        self.infra_gen = InfraGenerator(self.renderer)
        self.docs_gen = DocsGenerator(self.renderer)

    @classmethod
    def from_config(cls, config: Config) -> "ArtifactGenerators":
        """Build generators honouring ``config.scaffold.template_dir``."""
        return cls(TemplateRenderer(config.scaffold.template_dir))

    # -- Individual generators ---------------------------------------------

    def code_bundle(self, spec: AppSpec, slug: Optional[str] = None) -> CodeBundle:
        return self.code_gen.generate(spec, slug)

    def db(self, description: str) -> DbBundle:
        return self.db_gen.generate(description)

    def infra(self, name: str, slug: Optional[str] = None) -> InfraBundle:
        return self.infra_gen.generate(name, slug)

    def docs(
        self,
        name: str,
        description: str,
        *,
        language: str = TYPESCRIPT,
        slug: Optional[str] = None,
    ) -> DocsBundle:
        return self.docs_gen.generate(name, description, language=language, slug=slug)

    # -- Orchestration -----------------------------------------------------

    def bundle_all(self, spec: Union[AppSpec, Mapping[str, Any]]) -> ProjectBundle:
        """Generate every artifact layer for *spec*.

        The slug is derived once and handed to each generator so package
        names, analytics ids, bucket names and docs always agree.

        Args:
            spec: An ``AppSpec`` or a mapping with ``name``, ``description``
                and ``language`` keys.

        Returns:
            The assembled ``ProjectBundle``.
        """
        app = _coerce_spec(spec)
        slug = slugify(app.name)
        return ProjectBundle(
            code=self.code_bundle(app, slug),
            db=self.db(app.description),
            infra=self.infra(app.name, slug),
            docs=self.docs(app.name, app.description, language=app.language, slug=slug),
        )


def bundle_all(spec: Union[AppSpec, Mapping[str, Any]]) -> ProjectBundle:
    """Convenience wrapper: ``ArtifactGenerators().bundle_all(spec)``."""
    return ArtifactGenerators().bundle_all(spec)


def _coerce_spec(spec: Union[AppSpec, Mapping[str, Any]]) -> AppSpec:
    if isinstance(spec, AppSpec):
        return spec
    return AppSpec.model_validate(dict(spec))
