"""AppForge scaffolder -- deterministic project artifact generation.

Takes an ``AppSpec`` and renders in-memory bundles for application code,
database schema, infrastructure and documentation. Nothing is written to disk;
packaging the returned files is the caller's job.

Quick usage::

    from appforge.scaffolder import AppSpec, ArtifactGenerators

    bundle = ArtifactGenerators().bundle_all(
        AppSpec(name="My App", description="demo", language="TypeScript")
    )
    for f in bundle.all_files():
        print(f.path)
"""

from appforge.scaffolder.generator import ArtifactGenerators, bundle_all
from appforge.scaffolder.models import (
    AppSpec,
    CodeBundle,
    DbBundle,
    DocsBundle,
    GeneratedFile,
    InfraBundle,
    ProjectBundle,
)
from appforge.scaffolder.templates import TemplateRenderer

__all__ = [
    "AppSpec",
    "ArtifactGenerators",
    "CodeBundle",
    "DbBundle",
    "DocsBundle",
    "GeneratedFile",
    "InfraBundle",
    "ProjectBundle",
    "TemplateRenderer",
    "bundle_all",
]
