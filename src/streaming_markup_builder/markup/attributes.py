"""Attribute storage for the tag about to be opened."""

from typing import Any, Dict, Iterable, Iterator, Mapping, Optional, Tuple, Union


class AttributeStore:
    """Insertion-ordered attribute map scoped to the pending tag.

    The builder clears the store every time it flushes or closes a tag, so
    attributes never leak onto an unrelated element.
    """

    def __init__(self) -> None:
        self._values: Dict[str, Any] = {}

    def set(self, name: str, value: Any) -> None:
        """Set ``name`` to ``value``; a repeated name keeps its first position."""
        self._values[name] = value

    def update(
        self, pairs: Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]
    ) -> None:
        """Set several attributes at once, preserving their order."""
        items = pairs.items() if isinstance(pairs, Mapping) else pairs
        for name, value in items:
            self.set(name, value)

    def get(self, name: str, default: Optional[Any] = None) -> Optional[Any]:
        return self._values.get(name, default)

    def clear(self) -> None:
        self._values.clear()

    def items(self) -> Iterator[Tuple[str, Any]]:
        """Yield the attributes that will be rendered, skipping ``None`` entries."""
        for name, value in self._values.items():
            if name is not None and value is not None:
                yield name, value

    def __len__(self) -> int:
        return len(self._values)

    def __bool__(self) -> bool:
        return bool(self._values)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __repr__(self) -> str:
        return f"AttributeStore({self._values!r})"
