"""
Starting-hand win probabilities per table size.

One plain-text table per supported table size (2-10 players) is read once at
startup. Each line holds a starting-hand key and the percentage of showdowns
that hand wins against that many random hands::

    KAs 66.89
    77 66.41

The tables are immutable after loading, so one instance can be shared by
every agent in the process.
"""

from __future__ import annotations
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Sequence
import logging
import random

from deepthought.core.card import Card
from deepthought.core.hand import classify_hand
from deepthought.core.rules import MIN_PLAYERS, MAX_PLAYERS, check_table_size
from deepthought.exceptions import StatisticsError
from deepthought.strategy.translator import translate


logger = logging.getLogger(__name__)

DEFAULT_STATS_DIR = Path(__file__).resolve().parent.parent / "data" / "stats"
TABLE_SIZES = range(MIN_PLAYERS, MAX_PLAYERS + 1)


def stat_file_name(number_of_players: int) -> str:
    return f"{number_of_players}players.stat"


class StartingHandStatistics:
    """
    Win-probability lookup keyed on starting-hand key and table size.

    Usage:
        stats = StartingHandStatistics.load()
        stats.lookup("KAs", 6)
    """

    def __init__(
        self,
        tables: Mapping[int, Mapping[str, float]],
        missing_probability: float = 0.0,
    ):
        """
        Args:
            tables: Table size -> {key: win percentage}
            missing_probability: Returned (with a warning) for keys a table
                does not contain
        """
        for size in tables:
            check_table_size(size)
        self._tables = MappingProxyType({
            size: MappingProxyType(dict(table)) for size, table in tables.items()
        })
        self.missing_probability = missing_probability

    @classmethod
    def from_tables(
        cls,
        tables: Mapping[int, Mapping[str, float]],
        missing_probability: float = 0.0,
    ) -> StartingHandStatistics:
        return cls(tables, missing_probability)

    @classmethod
    def load(
        cls,
        directory: Optional[str | Path] = None,
        missing_probability: float = 0.0,
        table_sizes: Iterable[int] = TABLE_SIZES,
    ) -> StartingHandStatistics:
        """
        Read one statistics file per table size.

        Raises:
            StatisticsError: If a file is missing or contains a malformed line.
        """
        directory = Path(directory) if directory is not None else DEFAULT_STATS_DIR
        tables = {
            size: read_stat_file(directory / stat_file_name(size))
            for size in table_sizes
        }
        logger.info(
            f"Loaded starting-hand statistics for {len(tables)} table sizes from {directory}"
        )
        return cls(tables, missing_probability)

    @property
    def table_sizes(self) -> Sequence[int]:
        return sorted(self._tables)

    def keys(self, number_of_players: int) -> Sequence[str]:
        return sorted(self._table(number_of_players))

    def lookup(self, key: str, number_of_players: int) -> float:
        """
        Win percentage for a starting-hand key at a table of the given size.

        A key absent from the table yields missing_probability rather than
        an error, so a stale table never breaks a decision.

        Raises:
            ValueError: If number_of_players is outside 2-10 or no table was
                loaded for it.
        """
        table = self._table(number_of_players)
        probability = table.get(key)
        if probability is None:
            logger.warning(
                f"No statistics for {key!r} at {number_of_players} players, "
                f"using {self.missing_probability}"
            )
            return self.missing_probability
        return probability

    def win_probability(self, cards: Sequence[Card], number_of_players: int) -> float:
        """Translate two hole cards and look them up."""
        return self.lookup(translate(cards), number_of_players)

    def _table(self, number_of_players: int) -> Mapping[str, float]:
        check_table_size(number_of_players)
        try:
            return self._tables[number_of_players]
        except KeyError:
            raise ValueError(f"No statistics loaded for {number_of_players} players") from None

    def __contains__(self, key: str) -> bool:
        return any(key in table for table in self._tables.values())

    def __repr__(self) -> str:
        return f"StartingHandStatistics(table_sizes={list(self.table_sizes)})"


def read_stat_file(path: Path) -> Dict[str, float]:
    """
    Parse one statistics file. Blank lines are ignored.

    Raises:
        StatisticsError: If the file is missing or a line is malformed.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise StatisticsError(f"Cannot read statistics file {path}: {e}") from e

    table: Dict[str, float] = {}
    for line_number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        fields = line.split()
        if len(fields) != 2:
            raise StatisticsError(f"{path}:{line_number}: expected '<key> <probability>', got {line!r}")

        key, raw_probability = fields
        try:
            probability = float(raw_probability)
        except ValueError:
            raise StatisticsError(f"{path}:{line_number}: invalid probability {raw_probability!r}") from None
        if not 0 <= probability <= 100:
            raise StatisticsError(f"{path}:{line_number}: probability {probability} outside 0-100")
        table[key] = probability

    return table


def write_stat_file(path: Path, table: Mapping[str, float]) -> None:
    """Write one table in the format read_stat_file expects."""
    lines = [f"{key} {probability:.2f}" for key, probability in table.items()]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")


def simulate_win_probabilities(
    hole_cards: Sequence[Card],
    max_players: int = MAX_PLAYERS,
    trials: int = 1000,
    rng: Optional[random.Random] = None,
) -> Dict[int, float]:
    """
    Estimate how often two hole cards win a showdown against random hands.

    Every trial deals one board and max_players - 1 opponent hands; a table of
    n players is scored against the first n - 1 of them. Split pots count as
    a fractional win.

    Returns:
        Table size (2..max_players) -> win percentage
    """
    check_table_size(max_players)
    rng = rng or random.Random()
    hole_cards = list(hole_cards)
    deck = [c for c in (Card.from_int(i) for i in range(52)) if c not in hole_cards]
    opponents = max_players - 1
    wins = {size: 0.0 for size in range(MIN_PLAYERS, max_players + 1)}

    for _ in range(trials):
        dealt = rng.sample(deck, 5 + 2 * opponents)
        board = dealt[:5]
        mine = classify_hand(hole_cards + board).strength

        best, ties = None, 0
        for seat in range(opponents):
            theirs = classify_hand(dealt[5 + 2 * seat:7 + 2 * seat] + board).strength
            if best is None or theirs > best:
                best, ties = theirs, int(theirs == mine)
            elif theirs == best == mine:
                ties += 1

            if mine > best:
                wins[seat + 2] += 1
            elif mine == best:
                wins[seat + 2] += 1 / (1 + ties)

    return {size: 100 * won / trials for size, won in wins.items()}
