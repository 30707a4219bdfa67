"""Unit tests for Config and related Pydantic models (appforge.config).

Tests cover:
- PromptConfig / ScaffoldConfig defaults
- Config save/load round trip
- Config.from_env
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from appforge.config import Config, PromptConfig, ScaffoldConfig


pytestmark = pytest.mark.unit

_ENV_KEYS = (
    "APPFORGE_DEFAULT_ENV",
    "APPFORGE_PROMPT_SEED",
    "APPFORGE_SEED_DEFAULTS",
    "APPFORGE_DEFAULT_LANGUAGE",
    "APPFORGE_TEMPLATE_DIR",
)


def _clean_env() -> dict[str, str]:
    return {k: v for k, v in os.environ.items() if k not in _ENV_KEYS}


class TestDefaults:
    def test_prompt_defaults(self):
        cfg = PromptConfig()
        assert cfg.default_env == "dev"
        assert cfg.seed is None
        assert cfg.seed_defaults is True

    def test_scaffold_defaults(self):
        cfg = ScaffoldConfig()
        assert cfg.default_language == "TypeScript"
        assert cfg.default_description == ""
        assert cfg.template_dir is None

    def test_config_nests_defaults(self):
        cfg = Config()
        assert cfg.prompts == PromptConfig()
        assert cfg.scaffold == ScaffoldConfig()

    def test_seed_must_be_int(self):
        with pytest.raises(ValidationError):
            PromptConfig(seed="not-a-number")


class TestSaveLoad:
    def test_round_trip(self, tmp_path: Path):
        cfg = Config(
            prompts=PromptConfig(default_env="prod", seed=5),
            scaffold=ScaffoldConfig(default_language="JavaScript", template_dir=tmp_path),
        )
        target = cfg.save(tmp_path / "nested" / "config.json")
        assert target.exists()
        assert Config.load(target) == cfg

    def test_saved_file_is_json(self, tmp_path: Path):
        target = Config().save(tmp_path / "config.json")
        data = json.loads(target.read_text(encoding="utf-8"))
        assert data["prompts"]["default_env"] == "dev"


class TestFromEnv:
    def test_no_variables_gives_defaults(self):
        with patch.dict(os.environ, _clean_env(), clear=True):
            assert Config.from_env() == Config()

    def test_reads_variables(self, tmp_path: Path):
        env = {
            **_clean_env(),
            "APPFORGE_DEFAULT_ENV": "staging",
            "APPFORGE_PROMPT_SEED": "42",
            "APPFORGE_SEED_DEFAULTS": "false",
            "APPFORGE_DEFAULT_LANGUAGE": "JavaScript",
            "APPFORGE_TEMPLATE_DIR": str(tmp_path),
        }
        with patch.dict(os.environ, env, clear=True):
            cfg = Config.from_env()
        assert cfg.prompts.default_env == "staging"
        assert cfg.prompts.seed == 42
        assert cfg.prompts.seed_defaults is False
        assert cfg.scaffold.default_language == "JavaScript"
        assert cfg.scaffold.template_dir == tmp_path

    @pytest.mark.parametrize("raw, expected", [("1", True), ("yes", True), ("TRUE", True), ("0", False), ("off", False)])
    def test_seed_defaults_flag(self, raw, expected):
        with patch.dict(os.environ, {**_clean_env(), "APPFORGE_SEED_DEFAULTS": raw}, clear=True):
            assert Config.from_env().prompts.seed_defaults is expected
