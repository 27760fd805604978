"""Writing the barcode count table."""

from typing import List, TextIO, Tuple

from barcount.table import NO_BARCODE, FrequencyTable


def ordered_rows(table: FrequencyTable, sort_barcodes: bool = False) -> List[Tuple[str, int]]:
    """
    Return (barcode, count) rows in output order.

    Barcodes come in first-seen order, or by descending count when
    sort_barcodes is set (equal counts keep first-seen order). The no_barcode
    row is always last.
    """
    rows = list(table.items())
    if sort_barcodes:
        rows.sort(key=lambda row: row[1], reverse=True)
    rows.append((NO_BARCODE, table.no_barcode))
    return rows


def write_table(table: FrequencyTable, handle: TextIO, sort_barcodes: bool = False) -> int:
    """Write the table as tab-separated count/barcode lines. Returns rows written."""
    rows = ordered_rows(table, sort_barcodes)
    for barcode, count in rows:
        handle.write(f"{count}\t{barcode}\n")
    return len(rows)
