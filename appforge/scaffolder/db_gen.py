"""Database artifact generation: one Prisma schema and one migration stub."""

from __future__ import annotations

from .models import DbBundle, GeneratedFile
from .templates import TemplateRenderer


class DbGenerator:
    """Generates the database bundle from an app description."""

    MIGRATION_PATH = "migrations/0001_init.sql"

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def generate(self, description: str) -> DbBundle:
        """Render the schema (with *description* as a comment) and the initial migration.

        The description is folded onto one line so it cannot escape the
        schema comment.
        """
        ctx = {"description": " ".join(description.splitlines())}
        schema = self.renderer.render("db/schema.prisma.j2", ctx)
        migration = GeneratedFile(
            path=self.MIGRATION_PATH,
            content=self.renderer.render("db/0001_init.sql.j2", ctx),
        )
        return DbBundle(schema_text=schema, migrations=[migration])
