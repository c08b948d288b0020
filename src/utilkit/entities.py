from dataclasses import dataclass
from enum import Enum

class TypeTag(str, Enum):
    """
    Enumeration of type tags reported by `utilkit.objects.type_of`.

    Values not covered here are reported by their class name.
    """
    NULL = "Null"
    BOOLEAN = "Boolean"
    NUMBER = "Number"
    STRING = "String"
    ARRAY = "Array"
    OBJECT = "Object"
    FUNCTION = "Function"
    DATE = "Date"
    REGEXP = "RegExp"
    ERROR = "Error"
    SET = "Set"

@dataclass(frozen=True)
class NumberFormat:
    """
    Separators used by `utilkit.formatting.format_number`.

    Args:
        decimal_point: String placed between the integer and fractional parts
        group_separator: String inserted between digit groups of the integer part
        group_size: Number of digits per group, counted from the right

    The packaged defaults live in `utilkit/data/defaults.yaml` and are loaded
    through `utilkit.config.default_number_format`.
    """
    decimal_point: str = "."
    group_separator: str = ","
    group_size: int = 3

    def __post_init__(self):
        self._validate()

    def _validate(self):
        for name in ('decimal_point', 'group_separator'):
            if not isinstance(getattr(self, name), str):
                raise ValueError(f'{name} must be a string, got {getattr(self, name)!r}')
        if isinstance(self.group_size, bool) or not isinstance(self.group_size, int) or self.group_size < 1:
            raise ValueError(f'group_size must be a positive integer, got {self.group_size!r}')
