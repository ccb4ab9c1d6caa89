"""
Bracket simulation - seeded single-elimination regions.

Resolves seeded matchups round over round, and renders and summarizes
the resulting brackets.
"""
from .bracket import Matchup, Round, Region, compute_difficulty, seed_label
from .simulator import (
    BracketSimulator,
    TournamentResult,
    TournamentStats,
    next_round,
    opening_round,
    resolve_matchup,
    results_frame,
    simulate_region,
)
from .renderer import BracketRenderer

__all__ = [
    "Matchup",
    "Round",
    "Region",
    "compute_difficulty",
    "seed_label",
    "BracketSimulator",
    "TournamentResult",
    "TournamentStats",
    "next_round",
    "opening_round",
    "resolve_matchup",
    "results_frame",
    "simulate_region",
    "BracketRenderer",
]
