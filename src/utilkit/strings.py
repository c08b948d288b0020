"""String casing, pluralization and padding utilities.

The casing functions expect words separated by whitespace, `-` or `_`.
Input without any of these delimiters is treated as a single word.
"""

__docformat__ = 'google'

__all__ = [
    'trim',
    'pascalize',
    'camelize',
    'dasherize',
    'constantize',
    'constanize',
    'pluralize',
    'pad',
    'pad_right'
]

import re
import warnings
from utilkit.patterns import (
    TRIM_PATTERN,
    ALL_CAPS_PATTERN,
    WORD_BOUNDARY_PATTERN,
    UPPER_RUN_PATTERN,
    TRAILING_UPPER_RUN_PATTERN,
    UPPER_PATTERN,
    PLURAL_Y_PATTERN
)

def trim(s: str) -> str:
    """
    Strip leading and trailing whitespace, including byte-order marks and no-break spaces.

    Example:
        >>> trim('\\ufeff  hello\\xa0')
        'hello'
    """
    return TRIM_PATTERN.sub('', s)

def pascalize(s) -> str:
    """
    Convert a delimited string to PascalCase.

    A string made only of capitals and delimiters is lowercased first, so
    constants convert as words instead of staying an acronym.

    Args:
        s: Words separated by whitespace, `-` or `_`; non-strings are coerced

    Returns:
        PascalCase string

    Example:
        >>> pascalize('foo-bar')
        'FooBar'
        >>> pascalize('FOO_BAR')
        'FooBar'
        >>> pascalize('encodeURIComponent')
        'EncodeURIComponent'
    """
    s = str(s)
    if ALL_CAPS_PATTERN.fullmatch(s):
        s = s.lower()
    s = WORD_BOUNDARY_PATTERN.sub(lambda m: m.group(1).upper(), s)
    return s[:1].upper() + s[1:]

def camelize(s) -> str:
    """
    Convert a delimited string to camelCase.

    Example:
        >>> camelize('foo_bar baz')
        'fooBarBaz'
    """
    s = pascalize(s)
    return s[:1].lower() + s[1:]

def dasherize(s) -> str:
    """
    Convert a delimited or camel-cased string to dash-case.

    Consecutive capitals are treated as one word, so acronyms are not split
    letter by letter. When a run is followed by another word its last capital
    starts that word. When the string ends with a run of capitals, every run
    is kept whole.

    Args:
        s: String in any casing accepted by `pascalize`

    Returns:
        Lowercase words joined by `-`

    Example:
        >>> dasherize('encodeURIComponent')
        'encode-uri-component'
        >>> dasherize('fooBar')
        'foo-bar'
        >>> dasherize('parseURL')
        'parse-url'
    """
    s = pascalize(s)
    keep_last = TRAILING_UPPER_RUN_PATTERN.search(s) is not None

    def fold_run(match: re.Match) -> str:
        run = match.group(0)
        if keep_last:
            return run[0] + run[1:].lower()
        return run[0] + run[1:-1].lower() + run[-1]

    s = UPPER_RUN_PATTERN.sub(fold_run, s)
    s = UPPER_PATTERN.sub(lambda m: '-' + m.group(0).lower(), s)
    if s.startswith('-'):
        s = s[1:]
    if s.endswith('-'):
        s = s[:-1]
    return s

def constantize(s) -> str:
    """
    Convert a delimited or camel-cased string to CONSTANT_CASE.

    Example:
        >>> constantize('foo-bar')
        'FOO_BAR'
        >>> constantize('encodeURIComponent')
        'ENCODE_URI_COMPONENT'
    """
    return dasherize(s).replace('-', '_').upper()

def constanize(s) -> str:
    """
    Deprecated misspelling of `constantize`.
    """
    warnings.warn(
        'constanize is deprecated, use constantize',
        DeprecationWarning,
        stacklevel=2
    )
    return constantize(s)

def pluralize(s: str) -> str:
    """
    Pluralize an English word.

    Words ending in `y` end in `ies`; every other word gets an `s`.
    Irregular plurals are not handled.

    Example:
        >>> pluralize('category')
        'categories'
        >>> pluralize('cat')
        'cats'
    """
    return PLURAL_Y_PATTERN.sub('ie', s) + 's'

def pad(s, padding: str, length: int) -> str:
    """
    Prepend padding until a string reaches the given length.

    Args:
        s: Value to pad; non-strings are coerced
        padding: A single padding character
        length: Target length

    Returns:
        Padded string, or the input unchanged if it is already long enough

    Example:
        >>> pad(5, '0', 3)
        '005'
    """
    s = str(s)
    pad_length = length - len(s)
    if pad_length > 0:
        return padding * pad_length + s
    return s

def pad_right(s, padding: str, length: int) -> str:
    """
    Append padding until a string reaches the given length.

    Example:
        >>> pad_right('5', '0', 3)
        '500'
    """
    s = str(s)
    pad_length = length - len(s)
    if pad_length > 0:
        return s + padding * pad_length
    return s
