"""Levenshtein distance between barcodes.

Both functions use edlib global (NW) alignment with unit costs for
insertion, deletion and substitution.
"""

from typing import Optional

import edlib


def edit_distance(seq1: str, seq2: str) -> int:
    """Return the Levenshtein distance between two barcodes."""
    if len(seq1) == 0 or len(seq2) == 0:
        return max(len(seq1), len(seq2))

    result = edlib.align(seq1, seq2, mode="NW", task="distance")
    return result["editDistance"]


def bounded_edit_distance(seq1: str, seq2: str, max_dist: int) -> Optional[int]:
    """
    Return the Levenshtein distance if it is at most max_dist, otherwise None.

    edlib only explores the alignment band of width max_dist, so pairs that are
    obviously too far apart are rejected without a full alignment.

    Args:
        seq1: First barcode
        seq2: Second barcode
        max_dist: Largest distance of interest (>= 0)

    Returns:
        The distance, or None when it exceeds max_dist
    """
    if len(seq1) == 0 or len(seq2) == 0:
        distance = max(len(seq1), len(seq2))
        return distance if distance <= max_dist else None

    if abs(len(seq1) - len(seq2)) > max_dist:
        return None

    result = edlib.align(seq1, seq2, mode="NW", task="distance", k=max_dist)
    if result["editDistance"] == -1:
        return None
    return result["editDistance"]
