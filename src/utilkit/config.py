"""Loads formatting defaults shipped with the package or supplied by the caller.
"""

__docformat__ = 'google'

__all__ = [
    'defaults_path',
    'load_number_format',
    'default_number_format'
]

from dataclasses import fields
from functools import cache
from importlib import resources
import yaml
from utilkit.entities import NumberFormat
from utilkit.logger import get_logger

logger = get_logger(__name__)

@cache
def defaults_path():
    """ Packaged defaults """
    return resources.files('utilkit.data').joinpath('defaults.yaml')

def load_number_format(file_path = None) -> NumberFormat:
    """
    Read number formatting options from the `number_format` section of a YAML file.

    Keys missing from the file keep their `utilkit.entities.NumberFormat` defaults.

    Args:
        file_path: Path to a YAML file, or None for the packaged defaults

    Returns:
        NumberFormat built from the file

    Raises:
        ValueError: If the document or its `number_format` section is not a
            mapping, names an unknown option, or holds an invalid value
    """
    file_path = file_path or defaults_path()

    with open(file_path, 'r') as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f'Expected a mapping at the top of {file_path}')

    section = data.get('number_format') or {}
    if not isinstance(section, dict):
        raise ValueError(f'Expected number_format to be a mapping in {file_path}')

    known = {field.name for field in fields(NumberFormat)}
    unknown = set(section) - known
    if unknown:
        raise ValueError(f'Unknown number_format options in {file_path}: {sorted(unknown)}')

    try:
        number_format = NumberFormat(**section)
    except ValueError as e:
        raise ValueError(f'Invalid number_format in {file_path}: {e}') from e

    logger.debug(f'Loaded number format from {file_path}: {number_format}')
    return number_format

@cache
def default_number_format() -> NumberFormat:
    """Packaged number formatting defaults, loaded once."""
    return load_number_format()
