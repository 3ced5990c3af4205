"""Document Value: a schema-less, recursively typed tree for parsed front matter"""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Iterator, Optional

from pressure.errors import ParseError


class ValueKind(str, Enum):
    """Restrict values to the shapes YAML front matter can produce"""
    null = "null"
    bool = "bool"
    int = "int"
    float = "float"
    string = "string"
    array = "array"
    mapping = "mapping"


@dataclass(frozen=True)
class Value:
    """A tagged variant. Arrays hold a tuple of Values, mappings an ordered tuple of (key, value) pairs."""
    kind: ValueKind
    data: Any = None

    # --- constructors ---

    @classmethod
    def null(cls) -> "Value":
        return cls(ValueKind.null)

    @classmethod
    def string(cls, text: str) -> "Value":
        return cls(ValueKind.string, text)

    @classmethod
    def array(cls, items=()) -> "Value":
        return cls(ValueKind.array, tuple(items))

    @classmethod
    def mapping(cls, pairs=()) -> "Value":
        return cls(ValueKind.mapping, tuple(pairs))

    @classmethod
    def from_python(cls, obj: Any, _parents: frozenset = frozenset()) -> "Value":
        """Convert a PyYAML-loaded object into a Value tree.

        Explicitly tagged !!timestamp values come back as strings so that
        date parsing stays with the canonicalizer. Self-referencing aliases
        raise ParseError.
        """
        if obj is None:
            return cls.null()
        if isinstance(obj, bool):
            return cls(ValueKind.bool, obj)
        if isinstance(obj, int):
            return cls(ValueKind.int, obj)
        if isinstance(obj, float):
            return cls(ValueKind.float, obj)
        if isinstance(obj, str):
            return cls.string(obj)
        if isinstance(obj, datetime):
            return cls.string(obj.isoformat(sep=" "))
        if isinstance(obj, date):
            return cls.string(obj.isoformat())
        if isinstance(obj, (dict, list, tuple, set, frozenset)):
            if id(obj) in _parents:
                raise ParseError("Recursive alias in frontmatter")
            parents = _parents | {id(obj)}
            if isinstance(obj, dict):
                return cls.mapping(
                    (cls.from_python(k, parents), cls.from_python(v, parents)) for k, v in obj.items()
                )
            return cls.array(cls.from_python(v, parents) for v in obj)
        return cls.string(str(obj))

    # --- typed accessors ---

    def is_null(self) -> bool:
        return self.kind is ValueKind.null

    def as_string(self) -> Optional[str]:
        return self.data if self.kind is ValueKind.string else None

    def as_array(self) -> Optional[tuple["Value", ...]]:
        return self.data if self.kind is ValueKind.array else None

    def as_mapping(self) -> Optional[tuple[tuple["Value", "Value"], ...]]:
        return self.data if self.kind is ValueKind.mapping else None

    def get(self, key: str) -> Optional["Value"]:
        """Look up a string key in a mapping; None if missing or not a mapping."""
        for k, v in self.as_mapping() or ():
            if k.kind is ValueKind.string and k.data == key:
                return v
        return None

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None

    def keys(self) -> Iterator["Value"]:
        for k, _ in self.as_mapping() or ():
            yield k

    def with_item(self, key: str, value: "Value") -> "Value":
        """Return a new mapping with key set, replacing in place or appending."""
        pairs = self.as_mapping()
        if pairs is None:
            raise TypeError(f"with_item() needs a mapping, got {self.kind.value}")
        out, replaced = [], False
        for k, v in pairs:
            if k.kind is ValueKind.string and k.data == key:
                out.append((k, value))
                replaced = True
            else:
                out.append((k, v))
        if not replaced:
            out.append((Value.string(key), value))
        return Value.mapping(out)

    # --- export ---

    def to_python(self) -> Any:
        """Plain dict/list/scalar rendering for templates and JSON output."""
        if self.kind is ValueKind.array:
            return [v.to_python() for v in self.data]
        if self.kind is ValueKind.mapping:
            return {_key(k): v.to_python() for k, v in self.data}
        return self.data


def _key(k: Value) -> Any:
    """Mapping keys must stay hashable in plain Python; compound keys become their string form."""
    if k.kind in (ValueKind.array, ValueKind.mapping):
        return str(k.to_python())
    return k.data
