"""AppForge configuration.

Typed configuration for the prompt engine and the scaffolder. All settings use
Pydantic v2 models so they are validated at construction time and can be
serialised to/from JSON or read from environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class PromptConfig(BaseModel):
    """Settings for ``PromptService``."""

    default_env: str = Field(default="dev", description="Environment used when none is given")
    seed: int | None = Field(
        default=None,
        description="Seed for the variant sampler; ``None`` draws from system randomness",
    )
    seed_defaults: bool = Field(
        default=True, description="Install the built-in templates on construction"
    )


class ScaffoldConfig(BaseModel):
    """Settings for the artifact generators."""

    default_language: str = Field(default="TypeScript")
    default_description: str = Field(default="")
    template_dir: Path | None = Field(
        default=None,
        description="Override directory for the scaffold ``.j2`` templates",
    )


class Config(BaseModel):
    """Global AppForge configuration.

    Instances are typically created once by the CLI or the hosting service and
    handed to ``PromptService.from_config`` and ``ArtifactGenerators.from_config``.
    """

    prompts: PromptConfig = Field(default_factory=PromptConfig)
    scaffold: ScaffoldConfig = Field(default_factory=ScaffoldConfig)

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Args:
            path: Destination file. Parent directories are created.

        Returns:
            The path the file was written to.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            APPFORGE_DEFAULT_ENV, APPFORGE_PROMPT_SEED, APPFORGE_SEED_DEFAULTS,
            APPFORGE_DEFAULT_LANGUAGE, APPFORGE_TEMPLATE_DIR.
        """
        prompt_kwargs: dict[str, Any] = {}
        if os.environ.get("APPFORGE_DEFAULT_ENV"):
            prompt_kwargs["default_env"] = os.environ["APPFORGE_DEFAULT_ENV"]
        if os.environ.get("APPFORGE_PROMPT_SEED"):
            prompt_kwargs["seed"] = int(os.environ["APPFORGE_PROMPT_SEED"])
        if os.environ.get("APPFORGE_SEED_DEFAULTS"):
            prompt_kwargs["seed_defaults"] = os.environ["APPFORGE_SEED_DEFAULTS"].strip().lower() in (
                "1",
                "true",
                "yes",
                "on",
            )

        scaffold_kwargs: dict[str, Any] = {}
        if os.environ.get("APPFORGE_DEFAULT_LANGUAGE"):
            scaffold_kwargs["default_language"] = os.environ["APPFORGE_DEFAULT_LANGUAGE"]
        if os.environ.get("APPFORGE_TEMPLATE_DIR"):
            scaffold_kwargs["template_dir"] = Path(os.environ["APPFORGE_TEMPLATE_DIR"])

        return cls(
            prompts=PromptConfig(**prompt_kwargs),
            scaffold=ScaffoldConfig(**scaffold_kwargs),
        )
