"""
Rules loading and validation tests.

Verifies the bundled rules file carries the fixed move counts and that
malformed files fail fast.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from matecheck.domain.entities import PieceKind
from matecheck.rules import (
    DEFAULT_RULES_PATH,
    MoveRules,
    Rules,
    RulesError,
    load_rules,
)


def write_rules(tmp_path: Path, rules: Any) -> Path:
    path = tmp_path / "rules.yaml"
    path.write_text(yaml.dump(rules))
    return path


class TestBundledRules:
    def test_bundled_file_exists(self) -> None:
        assert DEFAULT_RULES_PATH.exists()

    def test_fixed_counts(self, rules: Rules) -> None:
        assert rules.project.slug == "matecheck"
        assert rules.moves.bishop == 5
        assert rules.moves.rook == 5
        assert rules.moves.queen == 8
        assert rules.moves.knight.vertical == 2
        assert rules.moves.knight.horizontal == 1

    def test_matches_defaults(self, rules: Rules) -> None:
        assert rules.moves == MoveRules()


class TestCountFor:
    def test_straight_pieces(self) -> None:
        moves = MoveRules()
        assert moves.count_for(PieceKind.BISHOP) == 5
        assert moves.count_for(PieceKind.ROOK) == 5
        assert moves.count_for(PieceKind.QUEEN) == 8

    def test_knight_rejected(self) -> None:
        with pytest.raises(ValueError):
            MoveRules().count_for(PieceKind.KNIGHT)


class TestLoadRules:
    def test_explicit_path(self, tmp_path: Path) -> None:
        path = write_rules(
            tmp_path,
            {"project": {"slug": "drill", "rules_version": "2"}, "moves": {"rook": 3}},
        )
        rules = load_rules(path)

        assert rules.project.slug == "drill"
        assert rules.moves.rook == 3
        assert rules.moves.queen == 8

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_rules(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text("invalid: yaml: content: [")

        with pytest.raises(RulesError, match="Invalid YAML"):
            load_rules(path)

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        path = write_rules(tmp_path, ["bishop", 5])

        with pytest.raises(RulesError):
            load_rules(path)

    def test_negative_count_rejected(self, tmp_path: Path) -> None:
        path = write_rules(
            tmp_path,
            {"project": {"slug": "x", "rules_version": "1"}, "moves": {"bishop": -1}},
        )

        with pytest.raises(RulesError, match="validation failed"):
            load_rules(path)

    def test_knight_needs_horizontal_step(self, tmp_path: Path) -> None:
        path = write_rules(
            tmp_path,
            {
                "project": {"slug": "x", "rules_version": "1"},
                "moves": {"knight": {"vertical": 2, "horizontal": 0}},
            },
        )

        with pytest.raises(RulesError):
            load_rules(path)

    def test_missing_project(self, tmp_path: Path) -> None:
        path = write_rules(tmp_path, {"moves": {}})

        with pytest.raises(RulesError):
            load_rules(path)

    def test_rules_error_is_value_error(self) -> None:
        assert issubclass(RulesError, ValueError)
