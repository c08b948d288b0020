"""Object shaping and introspection utilities.

Functions in this module accept any mapping, or any object exposing an
`items()` method such as a `pandas.Series`, and always return a new `dict`.
Inputs are never modified. A `None` input is treated as an empty mapping.
"""

__docformat__ = 'google'

__all__ = [
    'purify',
    'filter_object',
    'map_object',
    'map_key',
    'deep_clone',
    'type_of'
]

import copy
import re
from collections.abc import Mapping
from datetime import date
from functools import partial
from numbers import Number
from typing import Any, Callable, Dict, Optional
import pandas as pd
from utilkit.entities import TypeTag

def _bind(func: Callable, context) -> Callable:
    return func if context is None else partial(func, context)

def _equals(a, b) -> bool:
    if a is b:
        return True
    if type(a) is not type(b):
        return False
    if isinstance(a, (pd.Series, pd.DataFrame, pd.Index)):
        return a.equals(b)
    result = a == b
    # array-likes compare elementwise and are only equal by identity
    return pd.api.types.is_bool(result) and bool(result)

def purify(obj: Optional[Mapping], defaults: Optional[Mapping] = None, deep: bool = False) -> Dict:
    """
    Drop keys holding empty values or values equal to their defaults.

    A value is empty if it is `None` or an empty string. When `defaults` is
    given, keys whose value equals the same key in `defaults`, with the same
    type, are dropped too.

    Args:
        obj: Mapping to clean
        defaults: Mapping of default values to drop
        deep: Clean nested mappings too, against the matching nested defaults

    Returns:
        New dict with the remaining keys

    Example:
        >>> purify({'a': 1, 'b': None, 'c': '', 'd': 0})
        {'a': 1, 'd': 0}
        >>> purify({'page': 1, 'order': 'desc'}, {'page': 1})
        {'order': 'desc'}
        >>> purify({'filter': {'q': '', 'tag': 'x'}}, deep=True)
        {'filter': {'tag': 'x'}}
    """
    defaults = defaults if isinstance(defaults, Mapping) else {}
    purified = {}
    if obj is None:
        return purified

    for key, value in obj.items():
        is_empty = value is None or (isinstance(value, str) and value == '')
        is_default = key in defaults and _equals(defaults[key], value)
        if is_empty or is_default:
            continue
        if deep and isinstance(value, Mapping):
            purified[key] = purify(value, defaults.get(key), deep)
        else:
            purified[key] = value
    return purified

def filter_object(obj: Optional[Mapping], predicate: Callable[..., Any], context = None) -> Dict:
    """
    Keep the entries of a mapping for which a predicate is truthy.

    Args:
        obj: Mapping to filter
        predicate: Called as `predicate(value, key, obj)`
        context: If given, passed as the first argument to `predicate`,
            the way a bound method receives its instance

    Returns:
        New dict with the entries that passed

    Example:
        >>> filter_object({'a': 1, 'b': 2, 'c': 3}, lambda value, key, obj: value % 2)
        {'a': 1, 'c': 3}
    """
    result = {}
    if obj is None:
        return result

    predicate = _bind(predicate, context)
    for key, value in obj.items():
        if predicate(value, key, obj):
            result[key] = value
    return result

def map_object(obj: Optional[Mapping], iterator: Callable[..., Any], context = None) -> Dict:
    """
    Transform every value of a mapping, keeping its keys.

    Args:
        obj: Mapping to transform
        iterator: Called as `iterator(value, key)`; its result becomes the new value
        context: If given, passed as the first argument to `iterator`

    Example:
        >>> map_object({'a': 1, 'b': 2}, lambda value, key: value * 10)
        {'a': 10, 'b': 20}
    """
    if obj is None:
        return {}
    iterator = _bind(iterator, context)
    return {key: iterator(value, key) for key, value in obj.items()}

def map_key(obj: Optional[Mapping], key_map: Mapping) -> Dict:
    """
    Rename the keys of a mapping.

    Keys without an entry in `key_map` keep their name. If two keys end up
    with the same name, the one iterated last wins.

    Args:
        obj: Mapping to rename
        key_map: Old key to new key

    Example:
        >>> map_key({'a': 1, 'b': 2}, {'a': 'x'})
        {'x': 1, 'b': 2}
    """
    result = {}
    if obj is None:
        return result

    for key, value in obj.items():
        new_key = key_map.get(key)
        result[new_key if new_key else key] = value
    return result

def deep_clone(obj):
    """
    Recursively copy a value.

    Scalars and callables are returned as-is. Lists, tuples and sets are
    cloned element by element, mappings key by key into a new `dict`, and
    pandas objects with a deep `copy()`. Any other object goes through
    `copy.deepcopy`.

    Input must be acyclic. Shared references are cloned separately.

    Args:
        obj: Value to clone

    Returns:
        Clone equal to `obj` that shares no container with it

    Raises:
        ValueError: If a container contains itself

    Example:
        >>> source = {'a': [1, {'b': 2}]}
        >>> clone = deep_clone(source)
        >>> clone == source, clone['a'] is source['a']
        (True, False)
    """
    return _clone(obj, set())

def _clone(obj, active: set):
    if obj is None or isinstance(obj, (bool, Number, str, bytes)) or callable(obj):
        return obj
    if isinstance(obj, (pd.Series, pd.DataFrame, pd.Index)):
        return obj.copy(deep=True)
    if not isinstance(obj, (Mapping, list, tuple, set, frozenset)):
        return copy.deepcopy(obj)

    if id(obj) in active:
        raise ValueError(f'Cannot clone cyclic structure: {type(obj).__name__} contains itself')
    active.add(id(obj))
    try:
        if isinstance(obj, Mapping):
            return {key: _clone(value, active) for key, value in obj.items()}
        items = [_clone(item, active) for item in obj]
        if hasattr(obj, '_fields'):
            return type(obj)(*items)
        return type(obj)(items)
    finally:
        active.discard(id(obj))

def type_of(value) -> str:
    """
    Get the precise type tag of a value.

    Distinguishes values a truthiness or `isinstance(x, object)` check would
    lump together: `None` from mappings, lists from dicts, booleans from
    numbers. Values not covered by `utilkit.entities.TypeTag` are reported
    by their class name.

    Example:
        >>> type_of([])
        'Array'
        >>> type_of({})
        'Object'
        >>> type_of(None)
        'Null'
        >>> type_of(pd.DataFrame())
        'DataFrame'
    """
    if value is None:
        tag = TypeTag.NULL
    elif isinstance(value, bool):
        tag = TypeTag.BOOLEAN
    elif isinstance(value, Number):
        tag = TypeTag.NUMBER
    elif isinstance(value, str):
        tag = TypeTag.STRING
    elif isinstance(value, (list, tuple)):
        tag = TypeTag.ARRAY
    elif isinstance(value, Mapping):
        tag = TypeTag.OBJECT
    elif isinstance(value, date):
        tag = TypeTag.DATE
    elif isinstance(value, re.Pattern):
        tag = TypeTag.REGEXP
    elif isinstance(value, BaseException):
        tag = TypeTag.ERROR
    elif isinstance(value, (set, frozenset)):
        tag = TypeTag.SET
    elif callable(value):
        tag = TypeTag.FUNCTION
    else:
        return type(value).__name__
    return tag.value
