"""Tests for settings loading and validation."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from riskrating.config import RiskRatingConfig, configuration_problems, load_config, validate_config_file
from riskrating.config.validator import _suggest_key
from riskrating.constants.configurations import DEFAULT_CONFIGURATION_NAME
from riskrating.constants.url import DEFAULT_BASE_URL
from riskrating.constants.validation import (
    ALLOWED_CONFIG_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
    CFG008,
)
from riskrating.exceptions import ConfigError

STRICT_SETTINGS: str = (
    "default_configuration: Strict\n"
    "base_url: https://risk.example.test/\n"
    "store_path: store/mappings.json\n"
    "configurations:\n"
    "  Strict:\n"
    "    low: [0, 1]\n"
    "    medium: [1, 2]\n"
    "    high: [2, 9]\n"
)


def test_load_config_defaults_without_file(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert config == RiskRatingConfig()
    assert config.default_configuration == DEFAULT_CONFIGURATION_NAME
    assert config.base_url == DEFAULT_BASE_URL


def test_load_config_reads_settings(tmp_path: Path, write_settings: Callable[..., Path]) -> None:
    write_settings(STRICT_SETTINGS)

    config = load_config(tmp_path)

    assert config.default_configuration == "Strict"
    assert config.base_url == "https://risk.example.test/"
    assert config.resolve_store_path(tmp_path) == tmp_path / "store" / "mappings.json"
    assert config.extra_configurations["Strict"].labels == ("LOW", "MEDIUM", "HIGH")
    assert config.configuration_names[-1] == "Strict"


def test_load_config_empty_file_is_defaults(tmp_path: Path, write_settings: Callable[..., Path]) -> None:
    write_settings("")

    assert load_config(tmp_path) == RiskRatingConfig()


def test_load_config_explicit_missing_path_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path, tmp_path / "missing.yaml")


@pytest.mark.parametrize(
    ("content", "message"),
    [
        pytest.param("a: [", "Invalid YAML", id="bad-yaml"),
        pytest.param("- item\n", "must be a YAML mapping", id="not-mapping"),
        pytest.param("base_ur: x\n", "Unknown settings key", id="unknown-key"),
        pytest.param("base_url: 3\n", "non-empty string", id="non-string"),
        pytest.param("default_configuration: Nope\n", "default_configuration must be one of", id="unknown-default"),
        pytest.param(
            "configurations:\n  Loose:\n    LOW: [0, 3]\n    HIGH: [4, 9]\n",
            "configurations.Loose",
            id="bad-levels",
        ),
    ],
)
def test_load_config_rejects_invalid_settings(
    tmp_path: Path,
    write_settings: Callable[..., Path],
    content: str,
    message: str,
) -> None:
    write_settings(content)

    with pytest.raises(ConfigError, match=message):
        load_config(tmp_path)


def test_validate_config_file_valid(tmp_path: Path, write_settings: Callable[..., Path]) -> None:
    write_settings(STRICT_SETTINGS)

    assert validate_config_file(tmp_path) == []


def test_validate_config_file_missing_only_matters_when_explicit(tmp_path: Path) -> None:
    missing = tmp_path / "other.yaml"

    assert validate_config_file(tmp_path, missing) == []
    errors = validate_config_file(tmp_path, missing, config_explicit=True)
    assert [error.code for error in errors] == [CFG001]


@pytest.mark.parametrize(
    ("content", "code"),
    [
        pytest.param("a: [", CFG002, id="bad-yaml"),
        pytest.param("- item\n", CFG003, id="not-mapping"),
    ],
)
def test_validate_config_file_structural_errors(
    tmp_path: Path,
    write_settings: Callable[..., Path],
    content: str,
    code: str,
) -> None:
    write_settings(content)

    assert [error.code for error in validate_config_file(tmp_path)] == [code]


def test_validate_config_file_collects_all_errors(tmp_path: Path, write_settings: Callable[..., Path]) -> None:
    write_settings(
        "base_ur: https://x\n"
        "store_path: ''\n"
        "default_configuration: Missing\n"
        "configurations:\n"
        "  Default Configuration:\n"
        "    LOW: [0, 9]\n"
        "  Gappy:\n"
        "    LOW: [0, 3]\n"
        "    MEDIUM: [4, 6]\n"
        "    HIGH: [6, 9]\n"
    )

    errors = validate_config_file(tmp_path)

    assert [error.code for error in errors] == [CFG004, CFG005, CFG006, CFG007, CFG008]
    assert errors[0].hint == "did you mean `base_url`?"
    assert errors[3].field == "configurations.Gappy"


def test_configuration_problems() -> None:
    assert configuration_problems("X", {"LOW": [0, 3], "MEDIUM": [3, 6], "HIGH": [6, 9]}) == []
    assert configuration_problems("X", "LOW:0-9")[0][0] == CFG005
    assert configuration_problems("X", {"LOW": [0, 9]})[0][0] == CFG006
    assert configuration_problems("X", {"LOW": [0, "3"], "MEDIUM": [3, 6], "HIGH": [6, 9]})[0][0] == CFG005
    assert configuration_problems("X", {"LOW": [3, 0], "MEDIUM": [3, 6], "HIGH": [6, 9]})[0][0] == CFG005
    assert configuration_problems("X", {"LOW": [0, 3], "MEDIUM": [3, 20], "HIGH": [6, 9]}) == [
        (CFG005, "MEDIUM bounds must lie within 0-9")
    ]
    assert configuration_problems("Configuration 1", {})[0][0] == CFG008


def test_suggest_key() -> None:
    assert _suggest_key("store_pth", ALLOWED_CONFIG_KEYS) == "did you mean `store_path`?"
    assert _suggest_key("zzz", ALLOWED_CONFIG_KEYS) == ""
