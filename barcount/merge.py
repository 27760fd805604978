"""Greedy merging of low-count barcodes into nearby high-count barcodes.

Barcodes with more reads than the merge count are endpoints; all others are
candidates. Candidates are visited once each, rarest first, and folded into
the nearest endpoint if it lies within the threshold edit distance. When
several endpoints are equally near, one is chosen at random.
"""

import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from barcount.config import MergeThresholds
from barcount.distance import bounded_edit_distance
from barcount.table import FrequencyTable


@dataclass
class MergeSummary:
    """Outcome of a merge pass."""
    endpoints: int = 0
    merged: int = 0
    merged_reads: int = 0
    retained: int = 0


def partition(table: FrequencyTable, merge_count: int) -> Tuple[List[str], List[Tuple[str, int]]]:
    """
    Split the table's barcodes into merge endpoints and merge candidates.

    Args:
        table: Barcode counts (the no-barcode count is never included)
        merge_count: Barcodes with a count strictly greater than this are endpoints

    Returns:
        Tuple of:
        - endpoint barcodes, in table order
        - (barcode, count) candidates sorted by ascending count; equal counts
          keep table (first-seen) order
    """
    endpoints = [barcode for barcode, count in table.items() if count > merge_count]
    candidates = [(barcode, count) for barcode, count in table.items() if count <= merge_count]
    candidates.sort(key=lambda item: item[1])
    return endpoints, candidates


def nearest_endpoints(barcode: str, endpoints: List[str], max_dist: int) -> Tuple[Optional[int], List[str]]:
    """
    Find the endpoints closest to a barcode, ignoring any farther than max_dist.

    Returns:
        Tuple of (minimum distance, endpoints at that distance in input order),
        or (None, []) if no endpoint is within max_dist
    """
    best_dist = None
    nearest = []
    for endpoint in endpoints:
        # Once a match is found, anything farther can be rejected inside the band
        band = max_dist if best_dist is None else best_dist
        distance = bounded_edit_distance(barcode, endpoint, band)
        if distance is None:
            continue
        if best_dist is None or distance < best_dist:
            best_dist = distance
            nearest = [endpoint]
        else:
            nearest.append(endpoint)
    return best_dist, nearest


def merge_barcodes(table: FrequencyTable,
                   thresholds: MergeThresholds,
                   rng: Optional[random.Random] = None) -> MergeSummary:
    """
    Merge candidate barcodes into endpoints, modifying the table in place.

    Candidates are processed from lowest to highest count. Each one is folded
    into its nearest endpoint if that endpoint is within
    thresholds.threshold_distance; ties between equally near endpoints are
    broken with rng.choice. Endpoint counts grow as candidates are folded into
    them, but the set of endpoints is fixed before the first candidate is
    considered.

    Args:
        table: Barcode counts to merge
        thresholds: Merge count and maximum merge distance
        rng: Random source for tie-breaks (default: a fresh unseeded Random)

    Returns:
        MergeSummary describing what was merged
    """
    if rng is None:
        rng = random.Random()

    if not thresholds.enabled:
        logging.info("Merge count is 0; merging not performed")
        return MergeSummary(endpoints=len(table))

    endpoints, candidates = partition(table, thresholds.merge_count)
    logging.debug(f"{len(endpoints)} barcodes pass threshold count")
    summary = MergeSummary(endpoints=len(endpoints))

    if not endpoints:
        logging.info(f"No barcodes have counts > {thresholds.merge_count}; merging not performed")
        summary.retained = len(candidates)
        return summary

    for barcode, count in candidates:
        logging.debug(f"Barcode {barcode} count {count} <= {thresholds.merge_count}; attempting to merge")
        distance, nearest = nearest_endpoints(barcode, endpoints, thresholds.threshold_distance)

        if not nearest:
            logging.debug(f"Barcode {barcode} has no endpoint within distance "
                          f"{thresholds.threshold_distance}; not merging")
            summary.retained += 1
            continue

        target = rng.choice(nearest)
        if len(nearest) > 1:
            logging.debug(f"Barcode {barcode} is equidistant from {len(nearest)} endpoints; chose {target}")
        moved = table.fold(barcode, target)
        logging.debug(f"Merged barcode {barcode} (count={moved}) into {target} "
                      f"(distance is {distance}, new count={table[target]})")
        summary.merged += 1
        summary.merged_reads += moved

    logging.info(f"Merged {summary.merged} barcodes ({summary.merged_reads} reads) into "
                 f"{summary.endpoints} endpoints; {summary.retained} barcodes not merged")
    return summary
