"""Exceptions raised by the prompt engine."""

from __future__ import annotations


class PromptError(Exception):
    """Base class for prompt engine errors."""


class TemplateNotFound(PromptError):
    """Raised by ``PromptService.render`` when no template has the given name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Prompt template not found: {name}")
