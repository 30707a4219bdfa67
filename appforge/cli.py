"""Command line entry point.

Examples::

    appforge render codegen.app --env prod --set name=Todo --set "description=task tracker"
    appforge bundle "My App" --description demo --language JavaScript
    appforge bundle "My App" --json
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Optional

from appforge.config import Config
from appforge.prompts import PromptService, TemplateNotFound
from appforge.scaffolder import AppSpec, ArtifactGenerators
from appforge.utils import console, print_error, print_success, print_summary_table


def _parse_assignments(pairs: list[str]) -> dict[str, str]:
    """Turn ``["a=1", "b=x=y"]`` into ``{"a": "1", "b": "x=y"}``."""
    values: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"Expected key=value, got: {pair!r}")
        values[key] = value
    return values


def _cmd_render(args: argparse.Namespace, config: Config) -> int:
    if args.seed is not None:
        config.prompts.seed = args.seed
    service = PromptService.from_config(config)

    try:
        placeholders = _parse_assignments(args.set or [])
    except ValueError as exc:
        print_error(f"Error: {exc}")
        return 1

    env = args.env or config.prompts.default_env
    try:
        rendered = service.render(args.name, env, placeholders)
    except TemplateNotFound as exc:
        print_error(f"Error: {exc}")
        return 1

    print_summary_table(
        {
            "Template": rendered.name,
            "Version": rendered.version,
            "Variant": rendered.variant,
            "Environment": rendered.env,
        },
        title="Rendered prompt",
    )
    console.print(rendered.content, markup=False, highlight=False)
    return 0


def _cmd_bundle(args: argparse.Namespace, config: Config) -> int:
    spec = AppSpec(
        name=args.name,
        description=args.description if args.description is not None else config.scaffold.default_description,
        language=args.language or config.scaffold.default_language,
    )
    bundle = ArtifactGenerators.from_config(config).bundle_all(spec)

    if args.json:
        console.print_json(json.dumps(bundle.to_dict(), ensure_ascii=False))
        return 0

    print_summary_table(
        {f.path: f"{len(f.content)} chars" for f in bundle.all_files()},
        title=f"Bundle for {spec.name}",
    )
    print_success(f"Generated {len(bundle.all_files())} files for {spec.name}.")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="appforge",
        description="AppForge generation core -- prompt rendering and project scaffolding",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="Render a seeded prompt template")
    render.add_argument("name", help="Template name, e.g. codegen.app")
    render.add_argument("--env", default=None, help="Environment key (default from config)")
    render.add_argument(
        "--set",
        action="append",
        metavar="KEY=VALUE",
        help="Placeholder value; may be given several times",
    )
    render.add_argument("--seed", type=int, default=None, help="Seed for variant sampling")

    bundle = sub.add_parser("bundle", help="Scaffold a project bundle")
    bundle.add_argument("name", help="Human-readable app name")
    bundle.add_argument("--description", default=None)
    bundle.add_argument("--language", default=None, help="TypeScript or JavaScript")
    bundle.add_argument("--json", action="store_true", help="Print the bundle as JSON")

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = Config.from_env()
    if args.command == "render":
        return _cmd_render(args, config)
    return _cmd_bundle(args, config)


if __name__ == "__main__":
    sys.exit(main())
