"""Master server filter set.

Values are restricted to the shapes the master server understands:

    bool        rendered as 1 / 0
    int         rendered in decimal
    str         rendered as-is
    list[str]   rendered comma-joined
    FilterSet   only under the ``nor`` / ``nand`` keys

Anything else is rejected when the value is stored, so serialization never
has to guess.
"""

from collections import OrderedDict
from typing import Dict, Iterator, List, Mapping, Optional, Tuple, Union

from ..protocol.constants import NESTED_FILTER_KEYS

FilterValue = Union[bool, int, str, List[str], 'FilterSet']


class FilterSet:
    """Ordered mapping of filter keys to values."""

    def __init__(self, filters: Optional[Mapping[str, object]] = None, **kwargs):
        self._filters: 'OrderedDict[str, FilterValue]' = OrderedDict()
        for key, value in (filters or {}).items():
            self[key] = value
        for key, value in kwargs.items():
            self[key] = value

    @classmethod
    def coerce(cls, value: Union['FilterSet', Mapping[str, object], None]) -> 'FilterSet':
        if isinstance(value, FilterSet):
            return value
        return cls(value)

    def __setitem__(self, key: str, value: object):
        if not isinstance(key, str) or not key:
            raise TypeError(f"Filter keys must be non-empty strings, got {key!r}")
        self._filters[key] = self._check_value(key, value)

    def __getitem__(self, key: str) -> FilterValue:
        return self._filters[key]

    def __delitem__(self, key: str):
        del self._filters[key]

    def __contains__(self, key: object) -> bool:
        return key in self._filters

    def __iter__(self) -> Iterator[str]:
        return iter(self._filters)

    def __len__(self) -> int:
        return len(self._filters)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FilterSet):
            return list(self.items()) == list(other.items())
        return NotImplemented

    def __repr__(self) -> str:
        return f"FilterSet({dict(self._filters)!r})"

    def items(self) -> Iterator[Tuple[str, FilterValue]]:
        return iter(self._filters.items())

    @staticmethod
    def _check_value(key: str, value: object) -> FilterValue:
        if key in NESTED_FILTER_KEYS:
            if isinstance(value, FilterSet):
                nested = value
            elif isinstance(value, Mapping):
                nested = FilterSet(value)
            else:
                raise TypeError(f"Filter {key!r} expects a nested filter set, got {type(value).__name__}")
            for subkey, subvalue in nested.items():
                if isinstance(subvalue, FilterSet):
                    raise TypeError(f"Filter {key!r} cannot nest {subkey!r} another level deep")
            return nested

        if isinstance(value, (bool, int, str)):
            return value
        if isinstance(value, (list, tuple)):
            if not all(isinstance(item, str) for item in value):
                raise TypeError(f"Filter {key!r} list values must all be strings")
            return list(value)
        raise TypeError(f"Unsupported value for filter {key!r}: {type(value).__name__}")

    def to_dict(self) -> Dict[str, object]:
        result: Dict[str, object] = {}
        for key, value in self.items():
            result[key] = value.to_dict() if isinstance(value, FilterSet) else value
        return result
