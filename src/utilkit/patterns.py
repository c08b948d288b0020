"""Regex patterns shared by the string and number helpers.
"""

__docformat__ = 'google'

import re
from functools import cache
from typing import List

## Whitespace
# Constants
EXTRA_WHITESPACE: List[str] = ["\ufeff", "\xa0"]
"""Characters stripped by `utilkit.strings.trim` in addition to `\\s`.

The byte-order mark is not whitespace to `str.strip`."""

# Building blocks
WHITESPACE: str = f"[\\s{''.join(EXTRA_WHITESPACE)}]"
"""@private"""

# Patterns
TRIM_PATTERN: re.Pattern = re.compile(f"^{WHITESPACE}+|{WHITESPACE}+$")
"""Compiled regex matching leading and trailing whitespace.

Used in `utilkit.strings.trim`."""

## Casing
# Building blocks
DELIMITER: str = "[\\s\\-_]"
"""@private"""

UPPER_RUN: str = "[A-Z]{2,}"
"""@private"""

# Patterns
ALL_CAPS_PATTERN: re.Pattern = re.compile("[A-Z\\-_]+")
"""Compiled regex matching a string made only of capitals and delimiters.

Must be used with `fullmatch`. Such strings are lowercased before
pascalizing so that `FOO_BAR` becomes `FooBar` and not `FOOBAR`.

Used in `utilkit.strings.pascalize`."""

WORD_BOUNDARY_PATTERN: re.Pattern = re.compile(f"{DELIMITER}+(.)")
"""Compiled regex matching a delimiter run and the character following it.

Capture groups:
    * the character to be uppercased

Used in `utilkit.strings.pascalize`."""

UPPER_RUN_PATTERN: re.Pattern = re.compile(UPPER_RUN)
"""Compiled regex matching consecutive capitals, usually an acronym.

Used in `utilkit.strings.dasherize`."""

TRAILING_UPPER_RUN_PATTERN: re.Pattern = re.compile(f"{UPPER_RUN}\\Z")
"""Compiled regex matching an acronym at the very end of a string.

Used in `utilkit.strings.dasherize`."""

UPPER_PATTERN: re.Pattern = re.compile("[A-Z]")
"""Used in `utilkit.strings.dasherize`."""

## Pluralization
PLURAL_Y_PATTERN: re.Pattern = re.compile("y\\Z")
"""Compiled regex matching a final `y`, replaced with `ie` before adding `s`.

Used in `utilkit.strings.pluralize`."""

## Number formatting
@cache
def digit_group_pattern(group_size: int) -> re.Pattern:
    """
    Compile the regex locating grouping separator positions.

    Matches each digit that is followed by a whole number of digit groups
    up to the end of the string.

    Args:
        group_size: Number of digits per group

    Returns:
        Compiled regex with one capture group, the digit preceding a separator

    Example:
        >>> digit_group_pattern(3).sub('\\\\1,', '1234567')
        '1,234,567'
    """
    return re.compile(f"(\\d)(?=(?:\\d{{{group_size}}})+\\Z)")
