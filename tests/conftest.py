"""
Shared pytest fixtures for barcount tests.
"""

import gzip
import os
import shutil
import tempfile

import pytest
from Bio import SeqIO
from Bio.Seq import Seq
from Bio.SeqRecord import SeqRecord


def make_records(sequences):
    """Wrap plain sequences as FASTQ SeqRecords with constant quality."""
    return [
        SeqRecord(
            Seq(seq),
            id=f"read{i}",
            description="",
            letter_annotations={'phred_quality': [30] * len(seq)}
        )
        for i, seq in enumerate(sequences)
    ]


def write_fastq(path, sequences, compress=True):
    """Write sequences to a (gzipped) FASTQ file and return the path."""
    opener = gzip.open if compress else open
    with opener(path, 'wt') as f:
        SeqIO.write(make_records(sequences), f, 'fastq')
    return path


@pytest.fixture
def temp_dir():
    """Create a temporary working directory and chdir into it."""
    test_dir = tempfile.mkdtemp(prefix='barcount_test_')
    original_dir = os.getcwd()
    os.chdir(test_dir)
    yield test_dir
    os.chdir(original_dir)
    shutil.rmtree(test_dir)


@pytest.fixture
def barcode_reads():
    """Reads carrying a barcode between ACGT and GG flanks, plus unmatched reads."""
    return (
        ["TTACGTAAAAGGTT"] * 5 +
        ["TTACGTAAATGGTT"] * 1 +
        ["TTACGTCCCCGGTT"] * 3 +
        ["TTTTTTTTTTTTTT"] * 2
    )
