"""Generic object trees: scalars, ordered sequences and ordered mappings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Tuple, TypeVar, Union

from .markup import Markup, as_markup

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Scalar(Generic[T]):
    value: T


@dataclass(frozen=True)
class Sequence(Generic[T]):
    items: Tuple["GenericObject[T]", ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))


@dataclass(frozen=True)
class Mapping(Generic[T]):
    """Ordered key/value pairs. Duplicate keys are kept as given."""

    pairs: Tuple[Tuple[str, "GenericObject[T]"], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "pairs", tuple((key, value) for key, value in self.pairs))


GenericObject = Union[Scalar[T], Sequence[T], Mapping[T]]
HtmlObject = Union[Scalar[Markup], Sequence[Markup], Mapping[Markup]]


def map_keys_values(
    obj: GenericObject[T], key_fn: Callable[[str], str], value_fn: Callable[[T], U]
) -> GenericObject[U]:
    """Rebuild ``obj`` with every key and payload converted, keeping its shape."""
    if isinstance(obj, Scalar):
        return Scalar(value_fn(obj.value))
    if isinstance(obj, Sequence):
        return Sequence(tuple(map_keys_values(item, key_fn, value_fn) for item in obj.items))
    if isinstance(obj, Mapping):
        return Mapping(
            tuple(
                (key_fn(key), map_keys_values(value, key_fn, value_fn))
                for key, value in obj.pairs
            )
        )
    raise TypeError(f"not a generic object: {obj!r}")


def map_values(obj: GenericObject[T], value_fn: Callable[[T], U]) -> GenericObject[U]:
    return map_keys_values(obj, lambda key: key, value_fn)


def from_python(data: Any, scalar: Callable[[Any], T]) -> GenericObject[T]:
    """Build a generic object from nested dicts, lists and tuples.

    Dict order is kept and keys are converted with ``str``; any other value
    becomes ``Scalar(scalar(value))``.
    """
    if isinstance(data, dict):
        return Mapping(tuple((str(key), from_python(value, scalar)) for key, value in data.items()))
    if isinstance(data, (list, tuple)):
        return Sequence(tuple(from_python(item, scalar) for item in data))
    return Scalar(scalar(data))


def from_pairs(pairs: Iterable[Tuple[str, Any]]) -> HtmlObject:
    """Turn ``(key, value)`` pairs into a mapping of escaped-text scalars."""
    return Mapping(tuple((str(key), Scalar(as_markup(value))) for key, value in pairs))


def to_html_object(data: Any) -> HtmlObject:
    """Convert plain Python data into an HtmlObject; strings become escaped text."""
    return from_python(data, as_markup)


__all__ = [
    "GenericObject",
    "HtmlObject",
    "Mapping",
    "Scalar",
    "Sequence",
    "from_pairs",
    "from_python",
    "map_keys_values",
    "map_values",
    "to_html_object",
]
