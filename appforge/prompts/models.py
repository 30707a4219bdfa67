"""Pydantic v2 models for versioned prompt templates.

A template holds an ordered list of versions; each version holds one or more
weighted variants. Environment overrides patch the sampled content for a
specific deployment environment before caller placeholders are applied.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PromptVariant(BaseModel):
    """One candidate text for a prompt version, chosen by weight."""
    id: str = Field(..., description="Variant identifier, e.g. 'A' or 'B'")
    weight: float = Field(
        default=1.0,
        description="Relative sampling weight; fractional values are allowed",
    )
    content: str = Field(..., description="Template text with {{key}} tokens")


class PromptVersion(BaseModel):
    """A published version of a template."""
    version: str = Field(..., description="Version label; ordering is by list position")
    created_at: datetime = Field(default_factory=_utcnow)
    variants: list[PromptVariant] = Field(..., min_length=1)


class EnvironmentOverride(BaseModel):
    """Environment-keyed patch applied to sampled content."""
    env: str = Field(..., description="Environment key, e.g. 'dev' or 'prod'")
    content: Optional[str] = Field(
        default=None, description="Full replacement for the sampled text"
    )
    merge: Optional[dict[str, str]] = Field(
        default=None, description="Placeholder values substituted before caller placeholders"
    )


class PromptTemplate(BaseModel):
    """A named, versioned prompt template."""
    name: str = Field(..., description="Unique logical name, e.g. 'codegen.app'")
    description: str = Field(default="")
    tags: list[str] = Field(default_factory=list)
    versions: list[PromptVersion] = Field(..., min_length=1)
    environment_overrides: list[EnvironmentOverride] = Field(default_factory=list)

    @property
    def latest_version(self) -> PromptVersion:
        """The last version in insertion order.

        No semantic-version comparison is made: callers append versions in
        increasing order.
        """
        return self.versions[-1]

    def override_for(self, env: str) -> Optional[EnvironmentOverride]:
        """Return the first override whose ``env`` equals *env*, if any."""
        for override in self.environment_overrides:
            if override.env == env:
                return override
        return None


class RenderedPrompt(BaseModel):
    """Resolved prompt text plus the provenance of how it was produced."""
    name: str
    version: str
    variant: str
    env: str
    content: str
