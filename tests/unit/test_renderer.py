"""
Unit tests for bracket rendering and tournament statistics.
"""
import polars as pl
import pytest

from bracketsim.bracket import (
    BracketRenderer,
    Matchup,
    Region,
    Round,
    TournamentResult,
    results_frame,
)


@pytest.fixture
def small_region():
    """Two-round region: one upset in the first round, chalk in the final."""
    return Region(
        name="South",
        rounds=(
            Round(name="Semis", matchups=(
                Matchup(seeds=(1, 4), difficulty=0.25, winner=4),
                Matchup(seeds=(2, 3), difficulty=1.0, winner=3),
            )),
            Round(name="Final", matchups=(
                Matchup(seeds=(4, 3), difficulty=0.5, winner=3),
            )),
        ),
    )


class TestBracketRenderer:
    """Tests for text rendering."""

    def test_render_region(self, small_region):
        assert BracketRenderer().render_region(small_region) == "\n".join([
            "========== South",
            "===== Semis",
            "01 vs. 04 (D: 0.250) -> 04",
            "02 vs. 03 (D: 1.000) -> 03",
            "===== Final",
            "04 vs. 03 (D: 0.500) -> 03",
        ])

    def test_render_text_starts_with_seed(self, small_region):
        text = BracketRenderer().render_text(TournamentResult(seed=99, regions=[small_region]))
        lines = text.splitlines()
        assert lines[0] == "Seed: 99"
        assert lines[1] == "========== South"
        assert not text.endswith("\n")

    def test_regions_rendered_in_order(self, small_region):
        other = Region(name="East", rounds=small_region.rounds)
        text = BracketRenderer().render_text(TournamentResult(seed=1, regions=[small_region, other]))
        assert text.index("========== South") < text.index("========== East")


class TestResultsFrame:
    """Tests for the polars matchup table."""

    def test_one_row_per_matchup(self, small_region):
        df = results_frame([small_region])
        assert len(df) == 3
        assert df.columns == [
            "region", "round_num", "round_name", "match_num",
            "seed_a", "seed_b", "difficulty", "winner", "upset",
        ]

    def test_rows_in_bracket_order(self, small_region):
        df = results_frame([small_region])
        assert df["round_name"].to_list() == ["Semis", "Semis", "Final"]
        assert df["match_num"].to_list() == [1, 2, 1]
        assert df["upset"].to_list() == [True, True, False]

    def test_empty(self):
        df = results_frame([])
        assert len(df) == 0
        assert df.schema["difficulty"] == pl.Float64


class TestTournamentStats:
    """Tests for TournamentResult.summary."""

    def test_upsets_by_round(self, small_region):
        stats = TournamentResult(seed=1, regions=[small_region]).summary()
        assert stats.total_matchups == 3
        assert stats.upsets == 2
        assert stats.upset_rate == pytest.approx(2 / 3)
        assert stats.upsets_by_round == {"Semis": 2, "Final": 0}
        assert list(stats.upsets_by_round) == ["Semis", "Final"]

    def test_champions(self, small_region):
        stats = TournamentResult(seed=1, regions=[small_region]).summary()
        assert stats.champions == {"South": 3}

    def test_to_dict_percentages(self, small_region):
        data = TournamentResult(seed=1, regions=[small_region]).to_dict()
        assert data["seed"] == 1
        assert data["regions"][0]["champion"] == 3
        assert data["stats"]["upset_rate"] == 66.7

    def test_empty_tournament(self):
        stats = TournamentResult(seed=1).summary()
        assert stats.total_matchups == 0
        assert stats.upset_rate == 0.0
        assert stats.champions == {}
