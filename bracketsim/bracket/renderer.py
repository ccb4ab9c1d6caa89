"""
Bracket Renderer.

Turns fully simulated tournaments into the plain-text report printed by
the command line: the seed, then region -> round -> matchup.
"""
from typing import Iterable, List
import logging

from .bracket import Region
from .simulator import TournamentResult

logger = logging.getLogger(__name__)


class BracketRenderer:
    """
    Render simulated brackets as text.

    Every section is emitted in order from already populated data; nothing
    is rendered while a region is still being built.
    """

    SEED_HEADER = "Seed: {seed}"

    def render_seed(self, seed: int) -> str:
        return self.SEED_HEADER.format(seed=seed)

    def render_region(self, region: Region) -> str:
        """Region header followed by each round and its matchup lines."""
        return str(region)

    def render_regions(self, regions: Iterable[Region]) -> List[str]:
        return [self.render_region(region) for region in regions]

    def render_text(self, result: TournamentResult) -> str:
        """
        Render a complete tournament.

        Args:
            result: Simulated tournament

        Returns:
            Report text without a trailing newline
        """
        sections = [self.render_seed(result.seed)]
        sections.extend(self.render_regions(result.regions))
        logger.debug(f"Rendered {len(result.regions)} regions")
        return "\n".join(sections)
