"""Documentation artifact generation.

The README documents the conventions the code bundle ships with: feature
flags, the analytics SDK, i18n and the accessibility scanner.
"""

from __future__ import annotations

from typing import Optional

from appforge.utils import slugify

from .models import TYPESCRIPT, DocsBundle
from .templates import TemplateRenderer


class DocsGenerator:
    """Generates README, API docs and the architecture diagram."""

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def generate(
        self,
        name: str,
        description: str,
        *,
        language: str = TYPESCRIPT,
        slug: Optional[str] = None,
    ) -> DocsBundle:
        """Render the documentation for the app called *name*.

        *language* only decides which module extension the README points at.
        """
        ctx = {
            "name": name,
            "description": description,
            "slug": slugify(name) if slug is None else slug,
            "module_ext": "ts" if language == TYPESCRIPT else "js",
        }
        return DocsBundle(
            readme=self.renderer.render("docs/README.md.j2", ctx),
            api_docs=self.renderer.render("docs/api.md.j2", ctx),
            architecture=self.renderer.render("docs/architecture.md.j2", ctx),
        )
