"""Shared pytest fixtures for the AppForge test suite.

Provides reusable fixtures for:
- Isolated template registries and prompt services
- Deterministic random sources for variant sampling
- Sample prompt templates with versions, variants and overrides
- Artifact generators and sample app specs
"""

from __future__ import annotations

import random
from typing import Any

import pytest

from appforge.prompts import (
    EnvironmentOverride,
    PromptService,
    PromptTemplate,
    PromptVariant,
    PromptVersion,
    TemplateRegistry,
)
from appforge.scaffolder import AppSpec, ArtifactGenerators, TemplateRenderer


# ---------------------------------------------------------------------------
# Random sources
# ---------------------------------------------------------------------------


class FixedRandom:
    """Random source that replays a fixed sequence of draws."""

    def __init__(self, *values: float) -> None:
        self.values = list(values)
        self.calls = 0

    def random(self) -> float:
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


@pytest.fixture
def fixed_random():
    """Factory for ``FixedRandom`` sources."""
    return FixedRandom


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1234)


# ---------------------------------------------------------------------------
# Prompt templates
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_template() -> PromptTemplate:
    """A two-version template; the latest version has two weighted variants."""
    return PromptTemplate(
        name="codegen.page",
        description="Page generation",
        tags=["codegen"],
        versions=[
            PromptVersion(
                version="1.0.0",
                variants=[PromptVariant(id="old", content="Old prompt for {{name}}")],
            ),
            PromptVersion(
                version="1.1.0",
                variants=[
                    PromptVariant(id="A", weight=1, content="Build {{name}}: {{description}}"),
                    PromptVariant(id="B", weight=0.5, content="Create {{name}}"),
                ],
            ),
        ],
        environment_overrides=[
            EnvironmentOverride(env="dev", merge={"name": "DevApp"}),
            EnvironmentOverride(env="prod", content="PROD {{name}}"),
        ],
    )


@pytest.fixture
def registry(sample_template: PromptTemplate) -> TemplateRegistry:
    reg = TemplateRegistry()
    reg.upsert_template(sample_template)
    return reg


@pytest.fixture
def prompt_service(registry: TemplateRegistry, fixed_random) -> PromptService:
    """Service whose sampler always picks the first variant (draw of 0.1)."""
    return PromptService(registry=registry, rng=fixed_random(0.1))


# ---------------------------------------------------------------------------
# Scaffolding
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


@pytest.fixture(scope="session")
def generators(renderer: TemplateRenderer) -> ArtifactGenerators:
    return ArtifactGenerators(renderer)


@pytest.fixture
def ts_spec() -> AppSpec:
    return AppSpec(name="My App", description="demo", language="TypeScript")


@pytest.fixture
def js_spec() -> AppSpec:
    return AppSpec(name="My App", description="demo", language="JavaScript")


@pytest.fixture
def spec_dict() -> dict[str, Any]:
    return {"name": "My App", "description": "demo", "language": "TypeScript"}
