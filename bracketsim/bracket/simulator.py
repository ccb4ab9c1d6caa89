"""
Bracket Simulator - Seed-based matchup resolution engine.

Resolves matchups from seed difficulty, builds each round from the
winners of the previous one, and drives whole regions.

All randomness comes from an explicitly passed generator: anything with a
``random()`` method returning floats in [0, 1), normally ``random.Random``.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Any, Sequence
import logging
import random

import polars as pl

from .bracket import Matchup, Round, Region, compute_difficulty
from ..config import DEFAULT_ROUND_NAMES, SimulationSettings, get_settings
from ..exceptions import BracketError

logger = logging.getLogger(__name__)


def resolve_matchup(seed_a: int, seed_b: int, rng: random.Random) -> Matchup:
    """
    Resolve a matchup between two seeds with a single draw from ``rng``.

    The weaker seed wins when the draw falls below the difficulty. Adjacent
    seeds have difficulty 1.0, so the weaker of the two always advances.
    """
    if seed_a == seed_b:
        raise BracketError(f"seed {seed_a} cannot play itself")

    difficulty = compute_difficulty(seed_a, seed_b)
    high, low = sorted((seed_a, seed_b))

    winner = low if rng.random() < difficulty else high
    return Matchup(seeds=(seed_a, seed_b), difficulty=difficulty, winner=winner)


def next_round(name: str, matchups: Sequence[Matchup], rng: random.Random) -> Round:
    """
    Build the next round from the winners of ``matchups``.

    Matchup i pairs the winner of matchups[i] with the winner of
    matchups[-1 - i], so the result is ready for another call.
    """
    count = len(matchups)
    if count == 0 or count % 2:
        raise BracketError(f"cannot pair a round of {count} matchups")

    paired = []
    for lower in range(count // 2):
        upper = count - 1 - lower
        paired.append(resolve_matchup(matchups[lower].winner, matchups[upper].winner, rng))

    return Round(name=name, matchups=tuple(paired))


def opening_round(name: str, field_size: int, rng: random.Random) -> Round:
    """First round of a region: 1 vs N, 2 vs N-1, ... in that order."""
    if field_size < 2 or field_size % 2:
        raise BracketError(f"cannot seed a field of {field_size}")

    matchups = tuple(
        resolve_matchup(high, field_size + 1 - high, rng)
        for high in range(1, field_size // 2 + 1)
    )
    return Round(name=name, matchups=matchups)


def simulate_region(
    name: str,
    rng: random.Random,
    round_names: Optional[Sequence[str]] = None,
    field_size: int = 16,
) -> Region:
    """
    Simulate a full bracket for one region.

    Args:
        name: Region name ("South")
        rng: Random generator shared by the whole run
        round_names: One name per round, first round first
        field_size: Entrants in the region (power of two)

    Returns:
        Region with every round resolved
    """
    if round_names is None:
        round_names = DEFAULT_ROUND_NAMES
    if 2 ** len(round_names) != field_size:
        raise BracketError(
            f"{len(round_names)} round names do not fit a field of {field_size}"
        )

    rounds = [opening_round(round_names[0], field_size, rng)]
    for round_name in round_names[1:]:
        rounds.append(next_round(round_name, rounds[-1].matchups, rng))

    region = Region(name=name, rounds=tuple(rounds))
    logger.debug(f"Simulated {name}: champion seed {region.champion}")
    return region


@dataclass
class TournamentStats:
    """Statistics from one simulated tournament."""
    total_matchups: int
    upsets: int
    upset_rate: float
    upsets_by_round: Dict[str, int] = field(default_factory=dict)
    champions: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "total_matchups": self.total_matchups,
            "upsets": self.upsets,
            "upset_rate": round(self.upset_rate * 100, 1),
            "upsets_by_round": dict(self.upsets_by_round),
            "champions": dict(self.champions),
        }


def results_frame(regions: Sequence[Region]) -> pl.DataFrame:
    """One row per matchup, in region -> round -> matchup order."""
    rows = []
    for region in regions:
        for round_num, rnd in enumerate(region.rounds, start=1):
            for match_num, matchup in enumerate(rnd.matchups, start=1):
                rows.append({
                    "region": region.name,
                    "round_num": round_num,
                    "round_name": rnd.name,
                    "match_num": match_num,
                    "seed_a": matchup.seeds[0],
                    "seed_b": matchup.seeds[1],
                    "difficulty": matchup.difficulty,
                    "winner": matchup.winner,
                    "upset": matchup.is_upset,
                })

    schema = {
        "region": pl.Utf8,
        "round_num": pl.Int64,
        "round_name": pl.Utf8,
        "match_num": pl.Int64,
        "seed_a": pl.Int64,
        "seed_b": pl.Int64,
        "difficulty": pl.Float64,
        "winner": pl.Int64,
        "upset": pl.Boolean,
    }
    return pl.DataFrame(rows, schema=schema)


@dataclass
class TournamentResult:
    """The random seed of a run and the regions it produced."""
    seed: int
    regions: List[Region] = field(default_factory=list)

    def to_frame(self) -> pl.DataFrame:
        return results_frame(self.regions)

    def summary(self) -> TournamentStats:
        """Calculate upset statistics over every region."""
        df = self.to_frame()
        total = len(df)
        upsets = int(df["upset"].sum()) if total else 0

        by_round = (
            df.group_by(["round_num", "round_name"])
            .agg(pl.col("upset").sum().alias("upsets"))
            .sort("round_num")
        )

        return TournamentStats(
            total_matchups=total,
            upsets=upsets,
            upset_rate=upsets / total if total > 0 else 0.0,
            upsets_by_round={
                row["round_name"]: int(row["upsets"])
                for row in by_round.iter_rows(named=True)
            },
            champions={
                region.name: region.champion for region in self.regions
            },
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "seed": self.seed,
            "regions": [region.to_dict() for region in self.regions],
            "stats": self.summary().to_dict(),
        }


class BracketSimulator:
    """
    Simulate every region of a tournament from one random seed.

    A single generator is seeded once and shared by all regions in order,
    so the same seed always reproduces the same tournament.
    """

    def __init__(
        self,
        seed: int,
        settings: Optional[SimulationSettings] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize simulator.

        Args:
            seed: Random seed for the run
            settings: Regions and bracket shape (defaults to the process settings)
            rng: Generator to draw from (defaults to random.Random(seed))
        """
        self.seed = seed
        self.settings = settings or get_settings().simulation
        self.rng = rng if rng is not None else random.Random(seed)

    def simulate_region(self, name: str) -> Region:
        return simulate_region(
            name,
            self.rng,
            round_names=self.settings.round_names,
            field_size=self.settings.field_size,
        )

    def run(self) -> TournamentResult:
        """Simulate all configured regions in order."""
        logger.info(f"Simulating {len(self.settings.regions)} regions with seed {self.seed}")
        result = TournamentResult(seed=self.seed)
        for name in self.settings.regions:
            result.regions.append(self.simulate_region(name))
        return result
