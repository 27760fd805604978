"""Exceptions raised by barcount.

Only the command-line entry point catches these; everything else lets them
propagate to the caller.
"""


class BarcountError(Exception):
    """Base class for fatal barcount errors."""


class InputUnreadable(BarcountError):
    """The read file is missing, not readable, or not valid (gzipped) FASTQ."""


class PatternInvalid(BarcountError):
    """The search pattern or replacement expression cannot be compiled."""


class OutputUnwritable(BarcountError):
    """An output file (unmatched sequences or the count table) cannot be created."""
