"""
String and object manipulation helpers.

Import the functions directly:

    >>> from utilkit import dasherize, format_number
    >>> dasherize('encodeURIComponent')
    'encode-uri-component'
    >>> format_number(1234.5, 2)
    '1,234.50'

See individual module documentation for detailed information.
"""
from functools import cache
from types import SimpleNamespace
from . import objects
from . import strings
from . import formatting
from . import config
from . import entities
from .objects import *
from .strings import *
from .formatting import *
from . import logger
from .logger import get_logger

_logger = get_logger(__name__)

FUNCTIONS = objects.__all__ + strings.__all__ + formatting.__all__
"""Names of the toolkit functions attached by `activate`."""

@cache
def _toolkit() -> SimpleNamespace:
    return SimpleNamespace(**{name: globals()[name] for name in FUNCTIONS})

def activate(namespace = None):
    """
    Attach the toolkit functions to a shared helper namespace.

    Names the namespace already defines are left alone, so activating the
    same namespace again has no further effect.

    Args:
        namespace: Any object accepting attributes, or None for a namespace
            holding only the toolkit

    Returns:
        The namespace the functions were attached to

    Example:
        >>> helpers = activate()
        >>> helpers.pluralize('category')
        'categories'
        >>> activate() is helpers
        True
    """
    if namespace is None:
        return _toolkit()

    added = [name for name in FUNCTIONS if not hasattr(namespace, name)]
    for name in added:
        setattr(namespace, name, globals()[name])
    if added:
        _logger.debug(f'Activated {len(added)} helpers on {namespace!r}')
    return namespace

__all__ = [
    'objects',
    'strings',
    'formatting',
    'config',
    'entities',
    'logger',
    'activate',
    *FUNCTIONS
]
