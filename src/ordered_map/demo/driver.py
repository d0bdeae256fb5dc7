#!/usr/bin/env python3
"""TreeMap Demo Driver

Inserts a batch of keys, then removes a fraction of them, sampling the
tree's size and path heights to CSV as it goes.

Usage:
    python -m ordered_map.demo --keys 100000 --order ascending --remove-fraction 0.5
    python -m ordered_map.demo --keys 20000 --order random --plot /tmp/tree_map.png
"""

from __future__ import annotations

import argparse
import csv
import logging
import random
from pathlib import Path

from ..core.config import TreeMapConfig
from ..core.tree_map import TreeMap

logger = logging.getLogger(__name__)

FIELDS = [
    "op_index",
    "phase",
    "size",
    "left_path_height",
    "right_path_height",
    "common_height",
    "height",
    "balanced",
]


def make_keys(count: int, order: str, seed: int | None = None) -> list[int]:
    """Build the key sequence for the insert phase."""
    keys = list(range(1, count + 1))
    if order == "descending":
        keys.reverse()
    elif order == "random":
        random.Random(seed).shuffle(keys)
    elif order != "ascending":
        raise ValueError(f"Unknown key order: {order}")
    return keys


def sample_row(tree: TreeMap, op_index: int, phase: str) -> dict:
    """Sample current shape metrics from the tree."""
    return {
        "op_index": op_index,
        "phase": phase,
        "size": tree.size(),
        "left_path_height": tree.left_path_height(),
        "right_path_height": tree.right_path_height(),
        "common_height": tree.common_height(),
        "height": tree.height(),
        "balanced": int(tree.is_balanced()),
    }


def run_workload(
    keys: int,
    order: str = "ascending",
    remove_fraction: float = 0.0,
    sample_every: int = 1000,
    seed: int | None = None,
    config: TreeMapConfig | None = None,
) -> list[dict]:
    """Run the insert phase then the remove phase and return sampled rows.

    The first and last operation of each phase are always sampled.
    """
    if sample_every <= 0:
        raise ValueError("sample_every must be positive")
    if not 0.0 <= remove_fraction <= 1.0:
        raise ValueError("remove_fraction must be between 0 and 1")

    tree: TreeMap[int, str] = TreeMap(config=config)
    sequence = make_keys(keys, order, seed)
    rows: list[dict] = []
    op_index = 0

    logger.info(f"Inserting {len(sequence)} keys in {order} order")
    for i, key in enumerate(sequence):
        tree.put(key, str(key))
        op_index += 1
        if i % sample_every == 0 or i == len(sequence) - 1:
            rows.append(sample_row(tree, op_index, "insert"))

    doomed = sequence[: int(len(sequence) * remove_fraction)]
    if doomed:
        logger.info(f"Removing {len(doomed)} keys")
    for i, key in enumerate(doomed):
        tree.remove(key)
        op_index += 1
        if i % sample_every == 0 or i == len(doomed) - 1:
            rows.append(sample_row(tree, op_index, "remove"))

    return rows


def write_csv(rows: list[dict], out_csv: str | Path) -> None:
    with open(out_csv, "w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()
        w.writerows(rows)


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and run demo."""
    p = argparse.ArgumentParser(description="TreeMap shape demo driver")

    # Workload configuration
    p.add_argument("--keys", type=int, default=100_000, help="Number of keys to insert")
    p.add_argument(
        "--order",
        choices=["ascending", "descending", "random"],
        default="ascending",
        help="Insertion order",
    )
    p.add_argument(
        "--remove-fraction",
        type=float,
        default=0.0,
        help="Fraction of inserted keys removed afterwards, in insertion order",
    )
    p.add_argument("--seed", type=int, default=None, help="Seed for random order")
    p.add_argument(
        "--balance-tolerance",
        type=int,
        default=1,
        help="Path height difference still reported as balanced",
    )

    # Sampling configuration
    p.add_argument(
        "--sample-every", type=int, default=1000, help="Sample every N operations"
    )
    p.add_argument(
        "--out-csv", default="/tmp/tree_map_metrics.csv", help="Output CSV file"
    )
    p.add_argument("--plot", default=None, help="Render the CSV to this image file")
    p.add_argument("--log-level", default="WARNING", help="Logging level")

    args = p.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper())

    print(f"Starting TreeMap demo: {args.keys} keys, {args.order} order")
    rows = run_workload(
        args.keys,
        order=args.order,
        remove_fraction=args.remove_fraction,
        sample_every=args.sample_every,
        seed=args.seed,
        config=TreeMapConfig(balance_tolerance=args.balance_tolerance),
    )
    write_csv(rows, args.out_csv)

    last = rows[-1] if rows else None
    if last is not None:
        print(
            f"Final size={last['size']} height={last['height']} "
            f"left={last['left_path_height']} right={last['right_path_height']} "
            f"balanced={bool(last['balanced'])}"
        )
    print(f"Demo complete. Metrics written to {args.out_csv}")

    if args.plot:
        from .visualizer import plot_static

        plot_static(args.out_csv, args.plot)


if __name__ == "__main__":
    main()
