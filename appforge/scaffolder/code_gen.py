"""Application code generation.

Produces the React entry point wired to feature flags, i18n, the analytics
queue and the accessibility scanner, the presentational components, locale
files, ``package.json``, a minimal Express backend with a health endpoint and
a smoke test. Output is fully determined by the ``AppSpec``.
"""

from __future__ import annotations

import json
from typing import Any, Optional

from appforge.utils import slugify

from .models import AppSpec, CodeBundle, GeneratedFile
from .templates import TemplateRenderer


LOCALES: dict[str, dict[str, str]] = {
    "en": {
        "welcome": "Welcome to the app!",
        "getStarted": "Get Started",
        "next": "Next",
        "previous": "Previous",
        "finish": "Finish",
        "basic": "Basic",
        "pro": "Pro",
        "enterprise": "Enterprise",
        "selectPlan": "Select Plan",
        "users": "Users",
        "language": "Language",
    },
    "es": {
        "welcome": "¡Bienvenido a la aplicación!",
        "getStarted": "Comenzar",
        "next": "Siguiente",
        "previous": "Anterior",
        "finish": "Finalizar",
        "basic": "Básico",
        "pro": "Pro",
        "enterprise": "Empresarial",
        "selectPlan": "Seleccionar Plan",
        "users": "Usuarios",
        "language": "Idioma",
    },
}

COMPONENTS: tuple[str, ...] = (
    "LanguageSwitcher",
    "Onboarding",
    "PricingPlans",
    "UserManagement",
    "AccessibilityScanner",
)

_SERVER_PACKAGE: dict[str, Any] = {
    "name": "backend",
    "version": "1.0.0",
    "private": True,
    "type": "module",
    "scripts": {"dev": "ts-node src/index.ts", "build": "tsc", "start": "node dist/index.js"},
    "dependencies": {"express": "^4.18.2"},
    "devDependencies": {"ts-node": "^10.9.2", "typescript": "^5.4.0", "@types/express": "^4.17.21"},
}

_SERVER_TSCONFIG: dict[str, Any] = {
    "compilerOptions": {
        "target": "ES2020",
        "module": "ES2020",
        "moduleResolution": "Node",
        "outDir": "dist",
        "esModuleInterop": True,
        "strict": True,
        "skipLibCheck": True,
    },
    "include": ["src"],
}


def _json(data: dict[str, Any]) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


class CodeBundleGenerator:
    """Generates the application code bundle for an ``AppSpec``."""

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def generate(self, spec: AppSpec, slug: Optional[str] = None) -> CodeBundle:
        """Render every code file for *spec*.

        Args:
            spec: The app to scaffold.
            slug: Precomputed app slug. ``bundle_all`` passes the slug it shares
                with the other generators; standalone calls derive it here.

        Returns:
            A ``CodeBundle`` named after ``spec.name``.
        """
        slug = slugify(spec.name) if slug is None else slug
        ctx = self._build_context(spec, slug)
        ext = spec.component_ext
        mod = spec.module_ext

        files = [
            self._render("code/src/App.j2", f"src/App.{ext}", ctx),
            self._render("code/src/lib/featureFlags.j2", f"src/lib/featureFlags.{mod}", ctx),
            self._render("code/src/lib/analytics.j2", f"src/lib/analytics.{mod}", ctx),
            self._render("code/src/i18n/index.j2", f"src/i18n/index.{mod}", ctx),
        ]
        for locale, messages in LOCALES.items():
            files.append(GeneratedFile(path=f"src/i18n/locales/{locale}.json", content=_json(messages)))
        for component in COMPONENTS:
            files.append(
                self._render(
                    f"code/src/components/{component}.j2",
                    f"src/components/{component}.{ext}",
                    ctx,
                )
            )
        files.append(
            GeneratedFile(
                path="package.json",
                content=_json({"name": slug, "version": "1.0.0", "private": True}),
            )
        )

        # Backend scaffold is TypeScript regardless of the frontend language.
        files.extend([
            GeneratedFile(path="server/package.json", content=_json(_SERVER_PACKAGE)),
            GeneratedFile(path="server/tsconfig.json", content=_json(_SERVER_TSCONFIG)),
            self._render("code/server/src/index.ts.j2", "server/src/index.ts", ctx),
        ])

        tests = [self._render("code/tests/smoke.test.j2", f"tests/smoke.test.{mod}", ctx)]

        return CodeBundle(name=spec.name, files=files, tests=tests)

    # -- Helpers -----------------------------------------------------------

    @staticmethod
    def _build_context(spec: AppSpec, slug: str) -> dict[str, Any]:
        return {
            "name": spec.name,
            "description": spec.description,
            "slug": slug,
            "typescript": spec.is_typescript,
        }

    def _render(self, template: str, path: str, ctx: dict[str, Any]) -> GeneratedFile:
        return GeneratedFile(path=path, content=self.renderer.render(template, ctx))
