"""Run configuration for barcount."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class MergeThresholds:
    """Thresholds controlling barcode merging.

    Attributes:
        merge_count: Barcodes with more reads than this are merge endpoints;
            the rest are merge candidates (default: 0 = merging disabled)
        threshold_distance: Maximum edit distance between a candidate and the
            endpoint it is merged into (default: 1)
    """
    merge_count: int = 0
    threshold_distance: int = 1

    def __post_init__(self):
        if self.merge_count < 0:
            raise ValueError(f"merge_count must be >= 0, got {self.merge_count}")
        if self.threshold_distance < 0:
            raise ValueError(f"threshold_distance must be >= 0, got {self.threshold_distance}")

    @property
    def enabled(self) -> bool:
        return self.merge_count > 0


@dataclass
class RunConfig:
    """Everything a single barcount run needs.

    Attributes:
        pattern: Regular expression searched for in each read
        replacement: Template expanded from the match to form the barcode
        input_file: FASTQ file, optionally gzip-compressed
        sort_barcodes: Emit barcodes by descending count instead of first-seen order
        unmatched_file: Where to write sequences that did not match (None = discard)
        output_file: Where to write the count table (None = stdout)
        seed: Seed for the random tie-break between equidistant endpoints
        thresholds: Merge thresholds
    """
    pattern: str
    input_file: str
    replacement: str = r"\g<1>"
    sort_barcodes: bool = False
    unmatched_file: Optional[str] = None
    output_file: Optional[str] = None
    seed: Optional[int] = None
    thresholds: MergeThresholds = field(default_factory=MergeThresholds)

    @classmethod
    def from_args(cls, args) -> 'RunConfig':
        """Create config from parsed command-line arguments."""
        return cls(
            pattern=args.barcode_expression,
            input_file=args.input_file,
            replacement=args.replacement,
            sort_barcodes=args.sort,
            unmatched_file=getattr(args, 'unmatched', None),
            output_file=getattr(args, 'output', None),
            seed=getattr(args, 'seed', None),
            thresholds=MergeThresholds(
                merge_count=args.merge_count,
                threshold_distance=args.threshold_distance,
            ),
        )
