# topmark:header:start
#
#   project      : ByteNot
#   file         : test_model.py
#   file_relpath : tests/config/test_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the configuration model: freeze/thaw, merging and precedence."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from bytenot.config import Config, ConfigError, MutableConfig, PipelineMode
from bytenot.constants import DEFAULT_CHUNK_SIZE
from tests.conftest import parametrize

if TYPE_CHECKING:
    from pathlib import Path


def test_defaults() -> None:
    config: Config = MutableConfig.from_defaults().freeze()

    assert config.mode == PipelineMode.BUFFERED
    assert config.chunk_size == DEFAULT_CHUNK_SIZE == 65536
    assert config.config_files == ()


def test_empty_builder_freezes_to_defaults() -> None:
    assert MutableConfig().freeze() == MutableConfig.from_defaults().freeze()


def test_config_is_immutable() -> None:
    config: Config = MutableConfig.from_defaults().freeze()

    with pytest.raises(AttributeError):
        config.chunk_size = 1  # type: ignore[misc]


def test_thaw_edit_freeze() -> None:
    config: Config = MutableConfig.from_defaults().freeze()

    draft: MutableConfig = config.thaw()
    draft.mode = PipelineMode.STREAMING
    updated: Config = draft.freeze()

    assert updated.mode == PipelineMode.STREAMING
    assert config.mode == PipelineMode.BUFFERED


@parametrize("chunk_size", [0, -1])
def test_freeze_rejects_non_positive_chunk_size(chunk_size: int) -> None:
    with pytest.raises(ConfigError, match="chunk_size must be >= 1"):
        MutableConfig(chunk_size=chunk_size).freeze()


@parametrize(
    "raw, expected",
    [
        ("buffered", PipelineMode.BUFFERED),
        ("STREAMING", PipelineMode.STREAMING),
        (" streaming ", PipelineMode.STREAMING),
    ],
)
def test_mode_parse(raw: str, expected: PipelineMode) -> None:
    assert PipelineMode.parse(raw) == expected


def test_mode_parse_rejects_unknown() -> None:
    with pytest.raises(ConfigError, match="Invalid mode 'turbo'"):
        PipelineMode.parse("turbo")


def test_merge_toml_and_overrides_precedence() -> None:
    draft: MutableConfig = MutableConfig.from_defaults()
    draft.merge_toml({"mode": "streaming", "chunk_size": 10})
    draft.apply_overrides(chunk_size=3)

    config: Config = draft.freeze()

    assert config.mode == PipelineMode.STREAMING
    assert config.chunk_size == 3


def test_wrong_types_are_skipped(caplog: pytest.LogCaptureFixture) -> None:
    draft: MutableConfig = MutableConfig.from_defaults()
    with caplog.at_level(logging.WARNING):
        draft.merge_toml({"chunk_size": "big", "mode": 5, "extra": 1}, where="x")

    config: Config = draft.freeze()

    assert config == MutableConfig.from_defaults().freeze()
    assert "Unknown config key x.extra" in caplog.text


def test_to_toml_dict() -> None:
    config: Config = MutableConfig(mode=PipelineMode.STREAMING, chunk_size=7).freeze()

    assert config.to_toml_dict() == {"bytenot": {"mode": "streaming", "chunk_size": 7}}


def test_load_merged_layers(tmp_path: Path) -> None:
    (tmp_path / "bytenot.toml").write_text(
        '[bytenot]\nmode = "streaming"\nchunk_size = 100\n', encoding="utf-8"
    )
    extra: Path = tmp_path / "extra.toml"
    extra.write_text("chunk_size = 5\n", encoding="utf-8")

    config: Config = MutableConfig.load_merged(cwd=tmp_path, extra_config_files=[extra]).freeze()

    assert config.mode == PipelineMode.STREAMING
    assert config.chunk_size == 5
    assert config.config_files == (tmp_path / "bytenot.toml", extra)


def test_load_merged_no_config_skips_discovery(tmp_path: Path) -> None:
    (tmp_path / "bytenot.toml").write_text('mode = "streaming"\n', encoding="utf-8")

    config: Config = MutableConfig.load_merged(cwd=tmp_path, no_config=True).freeze()

    assert config.mode == PipelineMode.BUFFERED
    assert config.config_files == ()


def test_load_merged_tolerates_malformed_project_config(tmp_path: Path) -> None:
    (tmp_path / "bytenot.toml").write_text("[[[", encoding="utf-8")

    config: Config = MutableConfig.load_merged(cwd=tmp_path).freeze()

    assert config.mode == PipelineMode.BUFFERED


def test_load_merged_strict_for_explicit_files(tmp_path: Path) -> None:
    bad: Path = tmp_path / "bad.toml"
    bad.write_text("[[[", encoding="utf-8")

    with pytest.raises(ConfigError):
        MutableConfig.load_merged(cwd=tmp_path, extra_config_files=[bad])


def test_invalid_mode_in_file_is_config_error(tmp_path: Path) -> None:
    (tmp_path / "bytenot.toml").write_text('mode = "sideways"\n', encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid mode"):
        MutableConfig.load_merged(cwd=tmp_path)
