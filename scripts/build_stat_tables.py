#!/usr/bin/env python3
"""
Rebuild the starting-hand statistics tables.

For each of the 169 starting hands, simulates showdowns against 1-9 random
opponents and writes one <n>players.stat file per table size.

Usage:
    python scripts/build_stat_tables.py [--trials N] [--seed S] [--out DIR]

Runtime: several hours at the default trial count on a single core.
"""

import argparse
import logging
import random
import time
from pathlib import Path

from deepthought.core.rules import MAX_PLAYERS
from deepthought.strategy.statistics import (
    DEFAULT_STATS_DIR, TABLE_SIZES, simulate_win_probabilities,
    stat_file_name, write_stat_file,
)
from deepthought.strategy.translator import all_starting_hand_keys, cards_for_key

logger = logging.getLogger("build_stat_tables")


def main():
    parser = argparse.ArgumentParser(description="Rebuild starting-hand statistics")
    parser.add_argument("--trials", type=int, default=20000, help="Showdowns per starting hand")
    parser.add_argument("--seed", type=int, default=20140308, help="Random seed")
    parser.add_argument("--out", type=Path, default=DEFAULT_STATS_DIR, help="Output directory")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
    rng = random.Random(args.seed)
    tables = {size: {} for size in TABLE_SIZES}
    keys = all_starting_hand_keys()

    start = time.time()
    for i, key in enumerate(keys, start=1):
        results = simulate_win_probabilities(cards_for_key(key), MAX_PLAYERS, args.trials, rng)
        for size, probability in results.items():
            tables[size][key] = probability
        logger.info(f"[{i}/{len(keys)}] {key}: heads-up {results[2]:.2f}%, full table {results[MAX_PLAYERS]:.2f}%")

    args.out.mkdir(parents=True, exist_ok=True)
    for size, table in tables.items():
        write_stat_file(args.out / stat_file_name(size), table)
    logger.info(f"Wrote {len(tables)} tables to {args.out} in {time.time() - start:.0f}s")


if __name__ == "__main__":
    main()
