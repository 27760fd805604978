"""Reading FASTQ sequences and writing output files."""

import gzip
import logging
import zlib
from typing import Iterator, TextIO

from Bio.SeqIO.QualityIO import FastqGeneralIterator

from barcount.errors import InputUnreadable, OutputUnwritable

GZIP_MAGIC = b"\x1f\x8b"


def open_fastq(path: str) -> TextIO:
    """
    Open a FASTQ file for reading, transparently decompressing gzip input.

    Compression is detected from the file's magic bytes rather than its name,
    so misnamed files are still read correctly. Concatenated gzip members are
    read as one stream.
    """
    try:
        with open(path, 'rb') as f:
            magic = f.read(2)
        if magic == GZIP_MAGIC:
            logging.debug(f"{path} is gzip-compressed")
            return gzip.open(path, 'rt')
        return open(path, 'r')
    except OSError as e:
        raise InputUnreadable(f"Cannot read input file {path}: {e}") from e


def read_sequences(path: str) -> Iterator[str]:
    """
    Open a FASTQ file and return an iterator over its sequence lines.

    The file is opened immediately, so a missing file is reported before any
    reads are consumed. Decompression or format errors surface as
    InputUnreadable while iterating.
    """
    handle = open_fastq(path)
    return _iter_sequences(handle, path)


def _iter_sequences(handle: TextIO, path: str) -> Iterator[str]:
    try:
        with handle:
            for _title, sequence, _quality in FastqGeneralIterator(handle):
                yield sequence
    except (OSError, EOFError, zlib.error) as e:
        raise InputUnreadable(f"Corrupt or truncated input file {path}: {e}") from e
    except ValueError as e:
        raise InputUnreadable(f"Malformed FASTQ in {path}: {e}") from e


def open_output(path: str, description: str) -> TextIO:
    """Create a text file for writing, raising OutputUnwritable on failure."""
    try:
        return open(path, 'w')
    except OSError as e:
        raise OutputUnwritable(f"Cannot create {description} file {path}: {e}") from e
