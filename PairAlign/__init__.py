"""
PairAlign: exact pairwise sequence alignment
"""

__version__ = "0.1.0"
