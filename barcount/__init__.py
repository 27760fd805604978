"""
barcount: barcode extraction, counting and error-merging for sequencing reads.

Barcodes are pulled out of FASTQ reads with a regular expression, counted, and
low-count barcodes can be merged into nearby high-count barcodes by edit
distance.
"""

__version__ = "0.3.0"

from .config import MergeThresholds, RunConfig
from .core import count_reads, run, main as barcount_main
from .distance import bounded_edit_distance, edit_distance
from .matcher import BarcodeMatcher
from .merge import MergeSummary, merge_barcodes, partition
from .output import ordered_rows, write_table
from .table import NO_BARCODE, FrequencyTable

__all__ = [
    "BarcodeMatcher",
    "FrequencyTable",
    "MergeSummary",
    "MergeThresholds",
    "NO_BARCODE",
    "RunConfig",
    "barcount_main",
    "bounded_edit_distance",
    "count_reads",
    "edit_distance",
    "merge_barcodes",
    "ordered_rows",
    "partition",
    "run",
    "write_table",
    "__version__",
]
