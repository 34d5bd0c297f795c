"""A list with stable identifiers that survive removal of other items."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Generic, Iterable, Iterator, List, Optional, TypeVar, Union

T = TypeVar("T")


@dataclass
class _Metadata:
    rid: int
    validity_id: int = 0


@dataclass(frozen=True)
class Handle(Generic[T]):
    """Reference to an object in an IndexVector that can detect its erasure."""

    object_id: int = 0
    validity_id: int = 0
    vector: Optional["IndexVector[T]"] = field(default=None, compare=False, repr=False)

    def is_valid(self) -> bool:
        """True while the referenced object has not been erased."""
        return self.vector is not None and self.vector.is_valid(self.object_id, self.validity_id)

    def get(self) -> T:
        """Return the referenced object."""
        if self.vector is None:
            raise ValueError("handle is not bound to a vector")
        if not self.is_valid():
            raise ValueError(f"handle to object {self.object_id} is no longer valid")
        return self.vector[self.object_id]

    def __bool__(self) -> bool:
        return self.is_valid()


class IndexVector(Generic[T]):
    """Densely stored objects addressed by identifiers that stay stable.

    Erasing swaps the last object into the freed position, so data order
    changes, but every remaining identifier keeps pointing to its object.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._data: List[T] = []
        self._metadata: List[_Metadata] = []
        self._indexes: List[int] = []
        for item in items:
            self.append(item)

    def append(self, obj: T) -> int:
        """Store obj and return its identifier."""
        object_id = self._free_id()
        self._indexes[object_id] = len(self._data)
        self._data.append(obj)
        return object_id

    def erase(self, key: Union[int, Handle[T]]) -> None:
        """Remove the object with the given identifier or handle."""
        if isinstance(key, Handle):
            if key.vector is not self:
                raise ValueError("handle belongs to another vector")
            if not key.is_valid():
                raise ValueError(f"handle to object {key.object_id} is no longer valid")
            key = key.object_id
        data_id = self._position(key)
        last_data_id = len(self._data) - 1
        last_id = self._metadata[last_data_id].rid
        self._metadata[data_id].validity_id += 1
        self._data[data_id], self._data[last_data_id] = self._data[last_data_id], self._data[data_id]
        self._metadata[data_id], self._metadata[last_data_id] = (
            self._metadata[last_data_id],
            self._metadata[data_id],
        )
        self._indexes[key], self._indexes[last_id] = self._indexes[last_id], self._indexes[key]
        self._data.pop()

    def erase_via_data(self, idx: int) -> None:
        """Remove the object at position idx of the data storage."""
        self._check_data_index(idx)
        self.erase(self._metadata[idx].rid)

    def data_index(self, object_id: int) -> int:
        """Current storage position recorded for an identifier."""
        self._check_id(object_id)
        return self._indexes[object_id]

    def create_handle(self, object_id: int) -> Handle[T]:
        position = self._position(object_id)
        return Handle(object_id, self._metadata[position].validity_id, self)

    def create_handle_from_data(self, idx: int) -> Handle[T]:
        self._check_data_index(idx)
        meta = self._metadata[idx]
        return Handle(meta.rid, meta.validity_id, self)

    def is_valid(self, object_id: int, validity_id: int) -> bool:
        """True if validity_id still matches the identifier's current slot."""
        if not self.is_valid_id(object_id):
            return False
        return validity_id == self._metadata[self._indexes[object_id]].validity_id

    def remove_if(self, predicate: Callable[[T], bool]) -> None:
        """Erase every object for which predicate returns true."""
        i = 0
        while i < len(self._data):
            if predicate(self._data[i]):
                self.erase_via_data(i)
            else:
                i += 1

    def validity_id(self, object_id: int) -> int:
        self._check_id(object_id)
        return self._metadata[self._indexes[object_id]].validity_id

    def next_id(self) -> int:
        """The identifier the next appended object would receive."""
        size = len(self._data)
        if len(self._metadata) > size:
            return self._metadata[size].rid
        return size

    def clear(self) -> None:
        """Remove all objects and invalidate every outstanding handle."""
        self._data.clear()
        for meta in self._metadata:
            meta.validity_id += 1

    def is_valid_id(self, object_id: int) -> bool:
        """True if the identifier has ever been handed out."""
        return 0 <= object_id < len(self._indexes)

    @property
    def data(self) -> List[T]:
        """The densely stored objects, in storage order."""
        return self._data

    def __getitem__(self, object_id: int) -> T:
        return self._data[self._position(object_id)]

    def __setitem__(self, object_id: int, value: T) -> None:
        self._data[self._position(object_id)] = value

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def _free_id(self) -> int:
        size = len(self._data)
        if len(self._metadata) > size:
            slot = self._metadata[size]
            slot.validity_id += 1
            return slot.rid
        self._metadata.append(_Metadata(size))
        self._indexes.append(size)
        return size

    def _check_id(self, object_id: int) -> None:
        if not self.is_valid_id(object_id):
            raise KeyError(object_id)

    def _check_data_index(self, idx: int) -> None:
        if not 0 <= idx < len(self._data):
            raise IndexError(f"data index {idx} out of range")

    def _position(self, object_id: int) -> int:
        self._check_id(object_id)
        position = self._indexes[object_id]
        if position >= len(self._data):
            raise KeyError(object_id)
        return position