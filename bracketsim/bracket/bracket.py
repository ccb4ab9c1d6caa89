"""
Bracket Data Structures.

Matchups, rounds and regions of a single-elimination bracket. Every object
is created fully resolved and never changes afterwards.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Any, Tuple

from ..exceptions import BracketError


def seed_label(seed: int) -> str:
    """Display label for a seed, zero-padded to two digits ("01")."""
    return f"{seed:02d}"


def compute_difficulty(seed_a: int, seed_b: int) -> float:
    """
    Probability that the weaker seed upsets the stronger one.

    1.0 for adjacent seeds, shrinking as the gap widens (1 vs 16 -> 0.0625).
    """
    high, low = sorted((seed_a, seed_b))
    return 1 / (low - high + 1)


@dataclass(frozen=True)
class Matchup:
    """A single resolved contest between two seeds."""
    seeds: Tuple[int, int]              # In the order they were paired
    difficulty: float                   # Upset probability of the weaker seed
    winner: int                         # One of seeds

    def __post_init__(self):
        if self.winner not in self.seeds:
            raise BracketError(f"winner {self.winner} is not one of {self.seeds}")

    @property
    def names(self) -> Tuple[str, str]:
        return seed_label(self.seeds[0]), seed_label(self.seeds[1])

    @property
    def favorite(self) -> int:
        """The stronger (numerically smaller) seed."""
        return min(self.seeds)

    @property
    def underdog(self) -> int:
        """The weaker (numerically larger) seed."""
        return max(self.seeds)

    @property
    def loser(self) -> int:
        return self.seeds[1] if self.winner == self.seeds[0] else self.seeds[0]

    @property
    def is_upset(self) -> bool:
        """Check if the weaker seed won."""
        return self.winner == self.underdog

    def __str__(self) -> str:
        first, second = self.names
        return f"{first} vs. {second} (D: {self.difficulty:5.3f}) -> {seed_label(self.winner)}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "seeds": list(self.seeds),
            "difficulty": self.difficulty,
            "winner": self.winner,
            "upset": self.is_upset,
        }


@dataclass(frozen=True)
class Round:
    """An ordered set of matchups at one bracket stage.

    Order encodes bracket adjacency: matchup i meets matchup len-1-i next.
    """
    name: str
    matchups: Tuple[Matchup, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.matchups)

    @property
    def winners(self) -> List[int]:
        """Winning seeds in bracket order."""
        return [m.winner for m in self.matchups]

    def __str__(self) -> str:
        lines = [f"===== {self.name}"]
        lines.extend(str(m) for m in self.matchups)
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "matchups": [m.to_dict() for m in self.matchups],
        }


@dataclass(frozen=True)
class Region:
    """
    One independent bracket of successive rounds.

    Rounds are stored first to last; each was built from the winners of
    the one before it.
    """
    name: str
    rounds: Tuple[Round, ...] = field(default_factory=tuple)

    @property
    def champion(self) -> Optional[int]:
        """Winner of the final round, None for an empty region."""
        if not self.rounds or not self.rounds[-1].matchups:
            return None
        return self.rounds[-1].matchups[-1].winner

    @property
    def all_matchups(self) -> List[Matchup]:
        """Get all matchups in bracket order (first round first)."""
        matchups = []
        for rnd in self.rounds:
            matchups.extend(rnd.matchups)
        return matchups

    def get_round(self, name: str) -> Optional[Round]:
        """Get a round by name."""
        for rnd in self.rounds:
            if rnd.name == name:
                return rnd
        return None

    def __str__(self) -> str:
        lines = [f"========== {self.name}"]
        lines.extend(str(rnd) for rnd in self.rounds)
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize region to dictionary."""
        return {
            "name": self.name,
            "champion": self.champion,
            "rounds": [rnd.to_dict() for rnd in self.rounds],
        }
