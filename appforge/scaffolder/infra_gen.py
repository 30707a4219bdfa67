"""Infrastructure artifact generation.

Produces a Dockerfile, a GitHub Actions CI workflow and four Terraform files
(provider, variables, main, outputs). The S3 bucket in ``main.tf`` is named
``<slug>-artifacts``.
"""

from __future__ import annotations

from typing import Optional

from appforge.utils import slugify

from .models import GeneratedFile, InfraBundle
from .templates import TemplateRenderer


class InfraGenerator:
    """Generates Docker, CI and Terraform files for an app."""

    # Template name -> output path
    _DOCKER_FILES: dict[str, str] = {
        "infra/Dockerfile.j2": "Dockerfile",
    }
    _CI_FILES: dict[str, str] = {
        "infra/ci.yml.j2": ".github/workflows/ci.yml",
    }
    _TERRAFORM_FILES: dict[str, str] = {
        "infra/terraform/provider.tf.j2": "infra/terraform/provider.tf",
        "infra/terraform/variables.tf.j2": "infra/terraform/variables.tf",
        "infra/terraform/main.tf.j2": "infra/terraform/main.tf",
        "infra/terraform/outputs.tf.j2": "infra/terraform/outputs.tf",
    }

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def generate(self, name: str, slug: Optional[str] = None) -> InfraBundle:
        """Render the infrastructure files for the app called *name*.

        Args:
            name: Human-readable app name.
            slug: Precomputed slug of *name*; derived here when omitted.
        """
        slug = slugify(name) if slug is None else slug
        ctx = {"name": name, "slug": slug}
        return InfraBundle(
            dockerfiles=self._render_all(self._DOCKER_FILES, ctx),
            ci=self._render_all(self._CI_FILES, ctx),
            terraform=self._render_all(self._TERRAFORM_FILES, ctx),
        )

    def _render_all(self, mapping: dict[str, str], ctx: dict[str, str]) -> list[GeneratedFile]:
        return [
            GeneratedFile(path=path, content=self.renderer.render(template, ctx))
            for template, path in mapping.items()
        ]
