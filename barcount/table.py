"""Barcode frequency table."""

from typing import Dict, ItemsView, Mapping, Optional

NO_BARCODE = "no_barcode"


class FrequencyTable:
    """Read counts per barcode, plus the count of reads with no barcode.

    Barcodes are kept in first-seen order. Reads that did not match the
    pattern are counted separately in ``no_barcode`` and never take part in
    merging, so a barcode whose text happens to be "no_barcode" is still an
    ordinary barcode.
    """

    def __init__(self):
        self.counts: Dict[str, int] = {}
        self.no_barcode = 0

    @classmethod
    def from_counts(cls, counts: Mapping[str, int], no_barcode: int = 0) -> 'FrequencyTable':
        """Build a table from existing barcode counts, keeping their order."""
        table = cls()
        for barcode, count in counts.items():
            if count < 0:
                raise ValueError(f"Negative count {count} for barcode '{barcode}'")
            table.counts[barcode] = count
        table.no_barcode = no_barcode
        return table

    def count(self, barcode: Optional[str]) -> None:
        """Record one read: None means the read had no barcode."""
        if barcode is None:
            self.no_barcode += 1
        else:
            self.counts[barcode] = self.counts.get(barcode, 0) + 1

    def fold(self, barcode: str, into: str) -> int:
        """Move all reads of one barcode onto another and drop it. Returns reads moved."""
        moved = self.counts.pop(barcode)
        self.counts[into] += moved
        return moved

    def items(self) -> ItemsView[str, int]:
        return self.counts.items()

    def matched_reads(self) -> int:
        return sum(self.counts.values())

    def total_reads(self) -> int:
        return self.matched_reads() + self.no_barcode

    def __len__(self) -> int:
        return len(self.counts)

    def __contains__(self, barcode: str) -> bool:
        return barcode in self.counts

    def __getitem__(self, barcode: str) -> int:
        return self.counts[barcode]

    def __repr__(self):
        return f"FrequencyTable({self.counts!r}, no_barcode={self.no_barcode})"
