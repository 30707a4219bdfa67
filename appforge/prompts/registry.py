"""In-memory store of prompt templates keyed by name."""

from __future__ import annotations

from typing import Optional

from .models import PromptTemplate


class TemplateRegistry:
    """Keyed store of ``PromptTemplate`` objects.

    The registry is owned by whoever constructs it (usually a
    ``PromptService``); there is no process-wide instance. It performs no
    locking, so concurrent writers to the same name must be serialised by the
    caller. Last write wins.
    """

    def __init__(self, templates: Optional[list[PromptTemplate]] = None) -> None:
        self._templates: dict[str, PromptTemplate] = {}
        for tpl in templates or []:
            self.upsert_template(tpl)

    def upsert_template(self, tpl: PromptTemplate) -> None:
        """Insert *tpl*, replacing any template with the same name."""
        self._templates[tpl.name] = tpl

    def get_template(self, name: str) -> Optional[PromptTemplate]:
        """Return the template called *name*, or ``None``."""
        return self._templates.get(name)

    def list_templates(self) -> list[PromptTemplate]:
        """Return a snapshot of all templates in insertion order."""
        return list(self._templates.values())

    def remove_template(self, name: str) -> bool:
        """Drop the template called *name*. Returns ``True`` if one was removed."""
        return self._templates.pop(name, None) is not None

    def __contains__(self, name: object) -> bool:
        return name in self._templates

    def __len__(self) -> int:
        return len(self._templates)
