"""Barcode extraction by regular expression search and template expansion."""

import logging
import re
from typing import Optional

from barcount.errors import PatternInvalid

# $$, ${name} and $name references, as accepted by sed-like and Rust-style templates
DOLLAR_REFERENCE = re.compile(r'\$\$|\$\{(\w+)\}|\$(\w+)')


def translate_replacement(template: str) -> str:
    """
    Rewrite $-style group references into Python's \\g<...> form.

    "${1}" and "$1" become "\\g<1>", "${name}" and "$name" become
    "\\g<name>", and "$$" becomes a literal "$". Python-style references
    (\\1, \\g<name>) pass through untouched.
    """
    def _replace(match):
        if match.group(0) == '$$':
            return '$'
        return r'\g<%s>' % (match.group(1) or match.group(2))

    return DOLLAR_REFERENCE.sub(_replace, template)


class BarcodeMatcher:
    """Extracts a barcode from a read using a search pattern and a replacement template.

    Both the pattern and the template are validated on construction, so a run
    fails before any reads are processed if either is malformed.
    """

    def __init__(self, pattern: str, replacement: str = r'\g<1>'):
        try:
            self.pattern = re.compile(pattern)
        except re.error as e:
            raise PatternInvalid(f"Invalid search pattern '{pattern}': {e}") from e

        self.template = translate_replacement(replacement)
        try:
            # Compiling the substitution validates group references and escapes
            self.pattern.sub(self.template, '')
        except (re.error, IndexError) as e:
            raise PatternInvalid(f"Invalid replacement expression '{replacement}': {e}") from e

        logging.debug(f"Barcode pattern is {self.pattern.pattern!r}, template is {self.template!r}")

    def extract(self, sequence: str) -> Optional[str]:
        """Return the barcode for a read, or None if the pattern does not match.

        The barcode may be the empty string when the referenced groups capture
        nothing; that is still a match.
        """
        match = self.pattern.search(sequence)
        if match is None:
            return None
        return match.expand(self.template)
