"""Prompt template rendering engine.

Quick usage::

    import random

    from appforge.prompts import PromptService

    service = PromptService(rng=random.Random(7))
    service.seed_defaults()
    rendered = service.render("codegen.app", "prod", {"name": "Todo", "description": "tasks"})
"""

from appforge.prompts.errors import PromptError, TemplateNotFound
from appforge.prompts.models import (
    EnvironmentOverride,
    PromptTemplate,
    PromptVariant,
    PromptVersion,
    RenderedPrompt,
)
from appforge.prompts.registry import TemplateRegistry
from appforge.prompts.sampling import VariantSampler
from appforge.prompts.service import PromptService
from appforge.prompts.substitution import (
    apply_environment_override,
    find_placeholders,
    substitute,
)

__all__ = [
    "EnvironmentOverride",
    "PromptError",
    "PromptService",
    "PromptTemplate",
    "PromptVariant",
    "PromptVersion",
    "RenderedPrompt",
    "TemplateNotFound",
    "TemplateRegistry",
    "VariantSampler",
    "apply_environment_override",
    "find_placeholders",
    "substitute",
]
