#!/usr/bin/env python3

import argparse
import logging
import random
import sys
from typing import Iterable, Optional, TextIO, Tuple

from tqdm import tqdm

from barcount import __version__
from barcount.config import RunConfig
from barcount.errors import BarcountError
from barcount.matcher import BarcodeMatcher
from barcount.merge import MergeSummary, merge_barcodes
from barcount.output import write_table
from barcount.reads import open_output, read_sequences
from barcount.table import FrequencyTable


def count_reads(sequences: Iterable[str],
                matcher: BarcodeMatcher,
                table: Optional[FrequencyTable] = None,
                unmatched: Optional[TextIO] = None) -> FrequencyTable:
    """
    Count the barcode of every read.

    Args:
        sequences: Read sequences
        matcher: Extracts the barcode from each read
        table: Table to add to (default: a new empty table)
        unmatched: If given, reads without a barcode are written here, one per line

    Returns:
        The table of barcode counts
    """
    if table is None:
        table = FrequencyTable()

    for sequence in sequences:
        barcode = matcher.extract(sequence)
        if barcode is None and unmatched is not None:
            unmatched.write(f"{sequence}\n")
        table.count(barcode)

    return table


def log_counts(table: FrequencyTable) -> None:
    total = table.total_reads()
    unmatched_pct = table.no_barcode / total * 100 if total else 0.0
    logging.info(f"Processed {total} reads")
    logging.info(f"{table.no_barcode}/{total} ({unmatched_pct:.2f}%) reads did not match barcode")
    logging.info(f"{len(table)} barcodes detected")


def run(config: RunConfig) -> Tuple[FrequencyTable, MergeSummary]:
    """
    Count, merge and write barcodes for one input file.

    The pattern, input file and output files are all checked before any reads
    are processed.

    Raises:
        PatternInvalid, InputUnreadable, OutputUnwritable
    """
    logging.debug("Building barcode regular expression")
    matcher = BarcodeMatcher(config.pattern, config.replacement)

    logging.info(f"Parsing reads from {config.input_file}")
    sequences = read_sequences(config.input_file)

    unmatched = None
    output = None
    try:
        if config.unmatched_file:
            logging.info(f"Writing non-barcoded sequences to {config.unmatched_file}")
            unmatched = open_output(config.unmatched_file, "unmatched sequence")
        if config.output_file:
            output = open_output(config.output_file, "output")

        logging.debug("Processing reads")
        reads = tqdm(sequences, desc="Counting reads", unit="read", disable=None)
        table = count_reads(reads, matcher, unmatched=unmatched)
        log_counts(table)

        rng = random.Random(config.seed)
        summary = merge_barcodes(table, config.thresholds, rng)

        logging.info(f"{table.matched_reads()} reads assigned a barcode")
        logging.info(f"{len(table)} barcodes remain after merging")

        write_table(table, output if output is not None else sys.stdout, config.sort_barcodes)
        if output is not None:
            logging.info(f"Wrote barcode counts to {config.output_file}")
    finally:
        for handle in (unmatched, output):
            if handle is not None:
                handle.close()

    return table, summary


def non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Extract barcodes from FASTQ reads, count them, and merge likely sequencing errors"
    )
    parser.add_argument("barcode_expression", metavar="REGEX",
                        help="Regular expression searched for in each read sequence")
    parser.add_argument("input_file", metavar="FILE",
                        help="Input FASTQ file (gzip-compressed or plain)")
    parser.add_argument("-r", "--replacement", metavar="EXPR", default=r"\g<1>",
                        help="Replacement expression forming the barcode from the match; "
                             "accepts \\1, \\g<name>, $1 and ${name} references (default: \\g<1>)")
    parser.add_argument("-c", "--sort", action="store_true",
                        help="Sort returned barcodes by count (default: first-seen order)")
    parser.add_argument("-n", "--unmatched", metavar="FILE",
                        help="Write non-barcoded sequences to FILE")
    parser.add_argument("-m", "--merge-count", type=non_negative_int, default=0, metavar="N",
                        help="Threshold count for merging: barcodes with more than N reads absorb "
                             "similar barcodes with N or fewer (default: 0, merging disabled)")
    parser.add_argument("-t", "--threshold-distance", type=non_negative_int, default=1, metavar="D",
                        help="Maximum edit distance for merging (default: 1)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for choosing between equally distant merge targets")
    parser.add_argument("-o", "--output", metavar="FILE",
                        help="Write barcode counts to FILE instead of standard output")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Show log messages; repeat for more detail")
    parser.add_argument("--log-level", default=None,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Logging level (overrides --verbose)")
    parser.add_argument("--version", action="version",
                        version=f"barcount {__version__}",
                        help="Show program's version number and exit")

    args = parser.parse_args(argv)

    if args.log_level:
        log_level = getattr(logging, args.log_level)
    elif args.verbose >= 2:
        log_level = logging.DEBUG
    elif args.verbose == 1:
        log_level = logging.INFO
    else:
        log_level = logging.WARNING

    log_format = '%(asctime)s - %(levelname)s - %(message)s'
    logging.basicConfig(
        level=log_level,
        format=log_format
    )

    config = RunConfig.from_args(args)

    try:
        run(config)
    except BarcountError as e:
        logging.error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
