"""AppForge generation core.

Two independent engines live here:

* ``appforge.prompts`` -- versioned prompt templates rendered through weighted
  variant sampling, environment overlays and placeholder substitution.
* ``appforge.scaffolder`` -- deterministic generators that turn an ``AppSpec``
  into code, database, infrastructure and documentation artifacts.

Quick usage::

    from appforge import AppSpec, ArtifactGenerators, PromptService

    prompts = PromptService()
    prompts.seed_defaults()
    rendered = prompts.render("codegen.app", "dev", {"description": "todo app"})

    bundle = ArtifactGenerators().bundle_all(
        AppSpec(name="My App", description="demo", language="TypeScript")
    )
"""

from appforge.prompts import PromptService, TemplateNotFound, TemplateRegistry
from appforge.scaffolder import AppSpec, ArtifactGenerators, ProjectBundle

__version__ = "0.1.0"

__all__ = [
    "AppSpec",
    "ArtifactGenerators",
    "ProjectBundle",
    "PromptService",
    "TemplateNotFound",
    "TemplateRegistry",
]
