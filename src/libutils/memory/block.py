"""
Caller-owned byte blocks handed out by the allocation guard.
"""

from libutils.core.errors import InvalidHandleError


class Block:
    """
    Handle to a fixed-size region of bytes.

    A block is owned by whoever received it from ``allocate`` or
    ``reallocate`` and must be given back exactly once through ``release``
    (or by leaving a ``with`` block). Afterwards it is null: every access
    raises ``InvalidHandleError`` instead of touching freed storage.
    """

    __slots__ = ("_data",)

    def __init__(self, data: bytearray):
        self._data: bytearray | None = data

    @property
    def is_null(self) -> bool:
        return self._data is None

    @property
    def size(self) -> int:
        return len(self._storage())

    def _storage(self) -> bytearray:
        if self._data is None:
            raise InvalidHandleError("Access through a released block")
        return self._data

    def _take(self) -> bytearray:
        """Detach and return the storage, leaving this block null."""
        data = self._storage()
        self._data = None
        return data

    def _free(self) -> bool:
        """Drop the storage. Returns False if the block was already null."""
        if self._data is None:
            return False
        self._data = None
        return True

    def view(self) -> memoryview:
        """Writable view over the block's bytes."""
        return memoryview(self._storage())

    def tobytes(self) -> bytes:
        return bytes(self._storage())

    def __bytes__(self) -> bytes:
        return self.tobytes()

    def __len__(self) -> int:
        return self.size

    def __bool__(self) -> bool:
        return self._data is not None

    def __getitem__(self, key):
        return self._storage()[key]

    def __setitem__(self, key, value) -> None:
        data = self._storage()
        if isinstance(key, slice):
            start, stop, step = key.indices(len(data))
            if step == 1 and len(value) != max(stop - start, 0):
                # Slice assignment must not resize the block.
                raise ValueError("Slice assignment would change the block size")
        data[key] = value

    def __enter__(self) -> "Block":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._free()

    def __repr__(self) -> str:
        if self._data is None:
            return "<Block null>"
        return f"<Block size={len(self._data)}>"
