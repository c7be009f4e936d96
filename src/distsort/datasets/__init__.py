"""
Datasets package public API.

Re-export the dataset generator so callers can write:
    from distsort.datasets import make_dataset, SUPPORTED_DISTS, DEMO_ARRAY
"""

from .generators import DEMO_ARRAY, SUPPORTED_DISTS, make_dataset

__all__ = ["DEMO_ARRAY", "make_dataset", "SUPPORTED_DISTS"]
