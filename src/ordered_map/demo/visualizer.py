"""TreeMap Shape Visualizer

Reads the CSV written by the demo driver and plots size and heights.

Usage:
    python -m ordered_map.demo --keys 50000 --remove-fraction 0.5 --plot /tmp/tree_map.png
"""

from __future__ import annotations

import csv

import matplotlib

# Render straight to file, no display needed
matplotlib.use("Agg")

import matplotlib.pyplot as plt


def load_csv_data(csv_path: str) -> list[dict]:
    """Load CSV rows, converting numeric fields."""
    rows = []
    with open(csv_path) as f:
        reader = csv.DictReader(f)
        for row in reader:
            for key in row:
                if key != "phase":
                    row[key] = int(row[key])
            rows.append(row)
    return rows


def plot_static(csv_path: str, output_path: str) -> None:
    """Generate static plots from CSV data and save them to output_path."""
    rows = load_csv_data(csv_path)

    if not rows:
        print(f"No data found in {csv_path}")
        return

    ops = [row["op_index"] for row in rows]

    fig, axes = plt.subplots(2, 1, figsize=(12, 8), sharex=True)

    # (1) Number of mappings
    axes[0].plot(ops, [row["size"] for row in rows], color="tab:orange", linewidth=2)
    axes[0].set_ylabel("mappings", fontsize=11)
    axes[0].set_title("Size", fontsize=12, fontweight="bold")
    axes[0].grid(True, alpha=0.3)

    # (2) Heights
    axes[1].plot(ops, [row["height"] for row in rows], label="height", linewidth=2)
    axes[1].plot(ops, [row["left_path_height"] for row in rows], label="left path", linewidth=2)
    axes[1].plot(ops, [row["right_path_height"] for row in rows], label="right path", linewidth=2)
    axes[1].set_ylabel("nodes", fontsize=11)
    axes[1].set_xlabel("operation", fontsize=11)
    axes[1].legend(loc="upper left")
    axes[1].set_title("Height vs single-path heights", fontsize=12, fontweight="bold")
    axes[1].grid(True, alpha=0.3)

    # Mark where the removal phase starts
    for prev, row in zip(rows, rows[1:]):
        if prev["phase"] != row["phase"]:
            for ax in axes:
                ax.axvline(row["op_index"], color="red", linestyle="--", alpha=0.5, linewidth=1)

    plt.tight_layout()
    plt.savefig(output_path, dpi=150)
    plt.close(fig)
    print(f"Plot saved to {output_path}")
