"""Slot storage for assets addressed by typed handles."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AssetHandle:
    """Index of an asset in the storage for ``type``."""

    index: int
    type: type


class AssetStorage:
    """Holds assets of one type; freed slots are reused, most recent first."""

    def __init__(self, item_type):
        self.item_type = item_type
        self._storage = []
        self._free_ids = []

    def add(self, *args, **kwargs):
        """Construct an asset from the arguments and return its handle."""
        item = self.item_type(*args, **kwargs)
        if self._free_ids:
            index = self._free_ids.pop()
            self._storage[index] = item
        else:
            index = len(self._storage)
            self._storage.append(item)
        return AssetHandle(index, self.item_type)

    def remove(self, handle):
        """Free the handle's slot; False if the handle refers to nothing."""
        if not self.validity(handle):
            return False
        self._free_ids.append(handle.index)
        self._storage[handle.index] = None
        return True

    def remove_all(self):
        self._storage.clear()
        self._free_ids.clear()

    def get(self, handle):
        """The asset behind ``handle``."""
        if not self.validity(handle):
            raise KeyError(f"no {self.item_type.__name__} asset for handle {handle}")
        return self._storage[handle.index]

    def validity(self, handle):
        """True when the handle refers to a live asset of this storage's type."""
        return (
            handle.type is self.item_type
            and 0 <= handle.index < len(self._storage)
            and self._storage[handle.index] is not None
        )