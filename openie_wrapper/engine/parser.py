"""
Parser for the engine's ollie-format output.

Each line looks like::

    1.000: (Barack Obama; was born in; Hawaii)

The confidence score before the parenthesis is discarded. Fields are taken
verbatim from between the separators, whitespace included.
"""
from __future__ import annotations
from typing import List, NamedTuple, Optional

from ..exceptions import OutputParseError

FIELD_SEPARATOR = ";"


class Extraction(NamedTuple):
    """One subject-relation-object triple."""
    subject: str
    relation: str
    object: str

    def to_dict(self):
        return self._asdict()


def parse_ollie_line(line: str, line_number: Optional[int] = None) -> Extraction:
    """
    Parse a single ollie line into an Extraction.

    Args:
        line: One line of engine output
        line_number: 1-based position in the output, used in error messages

    Returns:
        Extraction built from the parenthesized, semicolon-separated fields

    Raises:
        OutputParseError: If the line has no "(...)" span or does not hold
            exactly three fields
    """
    start = line.find("(")
    if start == -1:
        raise OutputParseError("missing '('", line, line_number)
    end = line.find(")", start + 1)
    if end == -1:
        raise OutputParseError("missing ')'", line, line_number)

    fields = line[start + 1:end].split(FIELD_SEPARATOR)
    if len(fields) != 3:
        raise OutputParseError(
            f"expected 3 fields, found {len(fields)}", line, line_number
        )
    return Extraction(*fields)


def parse_ollie_output(text: str) -> List[Extraction]:
    """
    Parse the full engine output into extractions, one per non-empty line.

    Example:
        >>> parse_ollie_output("1.000: (Barack Obama; was; born)\\n")
        [Extraction(subject='Barack Obama', relation=' was', object=' born')]
    """
    extractions = []
    for line_number, line in enumerate(text.split("\n"), 1):
        if not line.strip():
            continue
        extractions.append(parse_ollie_line(line, line_number))
    return extractions
