"""Prompt rendering service.

Orchestrates the render pipeline:

1. registry lookup (``TemplateNotFound`` when absent)
2. latest version = last entry of ``versions``
3. weighted variant sampling
4. environment overlay (full replacement, then ``merge`` values)
5. caller placeholders, applied last; a ``merge`` key the caller also
   supplies is skipped so the placeholder wins
"""

from __future__ import annotations

from typing import Mapping, Optional

from appforge.config import Config

from .errors import TemplateNotFound
from .models import (
    EnvironmentOverride,
    PromptTemplate,
    PromptVariant,
    PromptVersion,
    RenderedPrompt,
)
from .registry import TemplateRegistry
from .sampling import RandomSource, VariantSampler
from .substitution import apply_environment_override


class PromptService:
    """Renders versioned prompt templates held in a ``TemplateRegistry``.

    Both the registry and the random source are injectable. A service built
    with a seeded ``random.Random`` renders the same variant sequence on every
    run.

    Attributes:
        registry: Template store owned by this service.
        sampler: Weighted variant picker.
    """

    def __init__(
        self,
        registry: Optional[TemplateRegistry] = None,
        rng: Optional[RandomSource] = None,
    ) -> None:
        self.registry = registry if registry is not None else TemplateRegistry()
        self.sampler = VariantSampler(rng)

    @classmethod
    def from_config(cls, config: Config) -> "PromptService":
        """Build a service from ``config.prompts``.

        A configured seed yields a seeded ``random.Random``; ``seed_defaults``
        installs the built-in templates.
        """
        import random

        prompts = config.prompts
        rng = random.Random(prompts.seed) if prompts.seed is not None else None
        service = cls(rng=rng)
        if prompts.seed_defaults:
            service.seed_defaults()
        return service

    # -- Registry delegation -----------------------------------------------

    def upsert_template(self, tpl: PromptTemplate) -> None:
        self.registry.upsert_template(tpl)

    def get_template(self, name: str) -> Optional[PromptTemplate]:
        return self.registry.get_template(name)

    def list_templates(self) -> list[PromptTemplate]:
        return self.registry.list_templates()

    # -- Rendering ---------------------------------------------------------

    def render(
        self,
        name: str,
        env: str,
        placeholders: Optional[Mapping[str, str]] = None,
    ) -> RenderedPrompt:
        """Render the latest version of template *name* for *env*.

        Args:
            name: Registered template name.
            env: Environment key used to pick an override.
            placeholders: Values for ``{{key}}`` tokens, applied after the
                environment's ``merge`` values and winning on shared keys.

        Returns:
            The resolved content together with the template name, version,
            variant id and environment it was produced from.

        Raises:
            TemplateNotFound: If no template called *name* is registered.
        """
        tpl = self.registry.get_template(name)
        if tpl is None:
            raise TemplateNotFound(name)

        version = tpl.latest_version
        variant = self.sampler.pick(version.variants)

        content = apply_environment_override(variant.content, tpl.override_for(env), placeholders)

        return RenderedPrompt(
            name=tpl.name,
            version=version.version,
            variant=variant.id,
            env=env,
            content=content,
        )

    # -- Bootstrap ---------------------------------------------------------

    def seed_defaults(self) -> None:
        """Install the built-in ``codegen.app`` template.

        Templates are not persisted, so a fresh service must be seeded on every
        process start.
        """
        self.upsert_template(
            PromptTemplate(
                name="codegen.app",
                description="Frontend+Backend code generation",
                tags=["codegen", "app"],
                versions=[
                    PromptVersion(
                        version="1.0.0",
                        variants=[
                            PromptVariant(
                                id="A",
                                content="Generate app: name={{name}} desc={{description}}",
                            ),
                            PromptVariant(
                                id="B",
                                weight=0.5,
                                content="Build full stack app for: {{description}}",
                            ),
                        ],
                    )
                ],
                environment_overrides=[
                    EnvironmentOverride(env="dev", merge={"name": "DevApp"}),
                ],
            )
        )
