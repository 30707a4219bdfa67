"""Tests for the database, infrastructure and documentation generators.

Covers:
- Schema with the description embedded as a comment, one migration
- Dockerfile, CI workflow (valid YAML) and four Terraform files
- README conventions, API docs and architecture diagram
"""

from __future__ import annotations

import pytest
import yaml

from appforge.scaffolder.db_gen import DbGenerator
from appforge.scaffolder.docs_gen import DocsGenerator
from appforge.scaffolder.infra_gen import InfraGenerator


pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# DbGenerator
# ---------------------------------------------------------------------------


class TestDbGenerator:
    @pytest.fixture
    def db_gen(self, renderer) -> DbGenerator:
        return DbGenerator(renderer)

    def test_schema_embeds_description(self, db_gen):
        bundle = db_gen.generate("a task tracker")
        assert bundle.schema_text.startswith("// Prisma schema for a task tracker\n")
        assert "model User {" in bundle.schema_text

    def test_multiline_description_stays_in_comment(self, db_gen):
        bundle = db_gen.generate("line one\nline two")
        first_line = bundle.schema_text.splitlines()[0]
        assert first_line == "// Prisma schema for line one line two"
        assert bundle.schema_text.splitlines()[1] == "model User {"

    def test_single_migration(self, db_gen):
        bundle = db_gen.generate("x")
        assert [m.path for m in bundle.migrations] == ["migrations/0001_init.sql"]
        assert 'CREATE TABLE IF NOT EXISTS "User"' in bundle.migrations[0].content

    def test_structure_fixed_across_descriptions(self, db_gen):
        first = db_gen.generate("alpha")
        second = db_gen.generate("beta")
        assert first.migrations == second.migrations
        assert first.schema_text.replace("alpha", "beta") == second.schema_text


# ---------------------------------------------------------------------------
# InfraGenerator
# ---------------------------------------------------------------------------


class TestInfraGenerator:
    @pytest.fixture
    def infra_gen(self, renderer) -> InfraGenerator:
        return InfraGenerator(renderer)

    def test_file_groups(self, infra_gen):
        bundle = infra_gen.generate("My App")
        assert [f.path for f in bundle.dockerfiles] == ["Dockerfile"]
        assert [f.path for f in bundle.ci] == [".github/workflows/ci.yml"]
        assert [f.path for f in bundle.terraform] == [
            "infra/terraform/provider.tf",
            "infra/terraform/variables.tf",
            "infra/terraform/main.tf",
            "infra/terraform/outputs.tf",
        ]

    def test_bucket_uses_slug(self, infra_gen):
        bundle = infra_gen.generate("My App")
        main_tf = next(f.content for f in bundle.terraform if f.path.endswith("main.tf"))
        assert 'bucket = "my-app-artifacts"' in main_tf

    def test_explicit_slug(self, infra_gen):
        bundle = infra_gen.generate("My App", slug="other")
        main_tf = next(f.content for f in bundle.terraform if f.path.endswith("main.tf"))
        assert "other-artifacts" in main_tf

    def test_ci_is_valid_yaml(self, infra_gen):
        ci = infra_gen.generate("My App").ci[0].content
        parsed = yaml.safe_load(ci)
        assert parsed["name"] == "CI"
        steps = parsed["jobs"]["build"]["steps"]
        assert {"run": "npm ci"} in steps

    def test_dockerfile_base_image(self, infra_gen):
        dockerfile = infra_gen.generate("My App").dockerfiles[0].content
        assert dockerfile.startswith("FROM node:18-alpine\n")
        assert 'CMD ["npm", "start"]' in dockerfile

    def test_outputs_reference_bucket(self, infra_gen):
        outputs = infra_gen.generate("My App").terraform[-1].content
        assert "aws_s3_bucket.artifacts.id" in outputs


# ---------------------------------------------------------------------------
# DocsGenerator
# ---------------------------------------------------------------------------


class TestDocsGenerator:
    @pytest.fixture
    def docs_gen(self, renderer) -> DocsGenerator:
        return DocsGenerator(renderer)

    def test_readme_header_and_description(self, docs_gen):
        readme = docs_gen.generate("My App", "demo").readme
        assert readme.startswith("# My App\n\ndemo\n")

    @pytest.mark.parametrize(
        "section",
        ["## Feature Flags", "## Analytics SDK", "## i18n", "## Accessibility"],
    )
    def test_readme_documents_conventions(self, docs_gen, section):
        assert section in docs_gen.generate("My App", "demo").readme

    def test_readme_analytics_slug(self, docs_gen):
        readme = docs_gen.generate("My App", "demo").readme
        assert "initAnalytics({ app: 'my-app' })" in readme

    def test_readme_points_at_language_modules(self, docs_gen):
        ts = docs_gen.generate("My App", "demo").readme
        js = docs_gen.generate("My App", "demo", language="JavaScript").readme
        assert "src/lib/featureFlags.ts" in ts
        assert "src/lib/featureFlags.js" in js

    def test_api_docs(self, docs_gen):
        assert "- GET /health" in docs_gen.generate("My App", "demo").api_docs

    def test_architecture_is_mermaid(self, docs_gen):
        architecture = docs_gen.generate("My App", "demo").architecture
        assert architecture.startswith("```mermaid\n")
        assert "API-->DB" in architecture
