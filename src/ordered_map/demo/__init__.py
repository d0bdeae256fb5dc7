"""Workload driver and plots for watching the tree's shape evolve."""

from .driver import FIELDS, run_workload, write_csv

__all__ = ["FIELDS", "run_workload", "write_csv"]
