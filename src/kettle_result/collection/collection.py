"""Collection: an ordered dict wrapper with Option/Result-returning accessors."""

from __future__ import annotations

import copy
from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import Any, Self

import msgspec

from kettle_result._logging import get_logger
from kettle_result.collection.iterator import CollectionIter
from kettle_result.config import Equality, get_config
from kettle_result.errors import CloneError, SerializeError
from kettle_result.types.option import Nothing, NothingType, Some
from kettle_result.types.result import Err, Ok

__all__ = ['Collection']

_encoder = msgspec.json.Encoder()
_decoder = msgspec.json.Decoder()


def _freeze_key(key: Any) -> Any:
    """Turn decoded JSON arrays back into tuples so they can be used as keys."""
    if isinstance(key, list):
        return tuple(_freeze_key(item) for item in key)
    return key


class Collection[K, V]:
    """Insertion-ordered mapping with unique keys.

    Lookups return Option instead of raising KeyError, and operations
    that can fail (clone, to_json, from_json) return Result. Overwriting a
    key keeps its original position.

    Callbacks receive `(value, key, collection)`; resolvers used by
    intersect and union receive `(value, other_value, key)`.

    Examples:
        >>> a = Collection[str, int]()
        >>> a.set('foo', 1).set('bar', 2)
        Collection({'foo': 1, 'bar': 2})
        >>> a.get('foo')
        Some(value=1)
        >>> a.get('baz')
        NothingType()
    """

    __slots__ = ('_inner',)

    def __init__(self, entries: Iterable[tuple[K, V]] | Mapping[K, V] | None = None) -> None:
        self._inner: dict[K, V] = {}
        if entries is not None:
            pairs = entries.items() if isinstance(entries, Mapping) else entries
            for key, value in pairs:
                self._inner[key] = value

    @classmethod
    def from_iterable(cls, entries: Iterable[tuple[K, V]] | Mapping[K, V]) -> Collection[K, V]:
        """Build a collection from (key, value) pairs or a mapping.

        Later pairs overwrite earlier ones with the same key.
        """
        return cls(entries)

    @classmethod
    def from_json(cls, data: str | bytes) -> Ok[Collection[Any, Any]] | Err[SerializeError]:
        """Decode the array-of-pairs form produced by to_json().

        Arrays in key position are decoded as tuples.

        Returns:
            Ok(collection), or Err(SerializeError) for malformed JSON,
            items that are not [key, value] pairs, or unhashable keys.
        """
        try:
            decoded = _decoder.decode(data)
        except msgspec.DecodeError as e:
            get_logger(__name__).debug('collection.from_json_failed', error=str(e))
            return Err(SerializeError(f'Invalid JSON: {e}', cause=e))

        if not isinstance(decoded, list):
            return Err(SerializeError(f'Expected a JSON array of pairs, got {type(decoded).__name__}'))

        result: Collection[Any, Any] = cls()
        for index, item in enumerate(decoded):
            if not isinstance(item, list) or len(item) != 2:  # noqa: PLR2004
                return Err(SerializeError(f'Item {index} is not a [key, value] pair: {item!r}'))
            key = _freeze_key(item[0])
            try:
                result._inner[key] = item[1]
            except TypeError as e:
                get_logger(__name__).debug('collection.from_json_failed', index=index, error=str(e))
                return Err(SerializeError(f'Unhashable key at item {index}: {key!r}', key=key, cause=e))
        return Ok(result)

    # --- Size and membership ---

    @property
    def size(self) -> int:
        """Number of entries in the collection."""
        return len(self._inner)

    def __len__(self) -> int:
        return len(self._inner)

    def has(self, key: K) -> bool:
        """Return True if an entry with this key exists."""
        return key in self._inner

    def __contains__(self, key: object) -> bool:
        return key in self._inner

    # --- Lookup and mutation ---

    def get(self, key: K) -> Some[V] | NothingType:
        """Return Some(value) for the key, or Nothing if it is absent.

        A stored None is returned as Some(None).
        """
        if key in self._inner:
            return Some(self._inner[key])
        return Nothing

    def set(self, key: K, value: V) -> Self:
        """Insert or overwrite an entry and return the collection for chaining."""
        self._inner[key] = value
        return self

    def insert(self, key: K, value: V) -> V:
        """Insert or overwrite an entry and return the value."""
        self._inner[key] = value
        return value

    def delete(self, key: K) -> bool:
        """Remove the entry for key. Returns True if an entry was removed."""
        if key in self._inner:
            del self._inner[key]
            return True
        return False

    def clear(self) -> None:
        """Remove every entry."""
        self._inner.clear()

    def replace(self, key: K, value: V) -> Some[V] | NothingType:
        """Write value under key, returning the previous value if there was one."""
        old = self.get(key)
        self._inner[key] = value
        return old

    def get_or_insert(self, key: K, value: V) -> V:
        """Return the value for key, inserting `value` first if the key is absent."""
        if key in self._inner:
            return self._inner[key]
        self._inner[key] = value
        return value

    def get_or_insert_with(self, key: K, f: Callable[[K, Self], V]) -> V:
        """Return the value for key, inserting f(key, self) first if the key is absent.

        f is only called when the key is absent.
        """
        if key in self._inner:
            return self._inner[key]
        value = f(key, self)
        self._inner[key] = value
        return value

    # --- Views and iteration ---

    def keys(self) -> Iterator[K]:
        """Iterate over keys in insertion order."""
        return iter(self._inner.keys())

    def values(self) -> Iterator[V]:
        """Iterate over values in insertion order."""
        return iter(self._inner.values())

    def entries(self) -> Iterator[tuple[K, V]]:
        """Iterate over (key, value) pairs in insertion order."""
        return iter(self._inner.items())

    def __iter__(self) -> Iterator[tuple[K, V]]:
        return iter(self._inner.items())

    def iter(self) -> CollectionIter[K, V]:
        """Return a peekable iterator whose next() yields Some((k, v)) then Nothing."""
        return CollectionIter(iter(self._inner.items()))

    # --- Set algebra ---

    def diff(self, other: Collection[K, V]) -> Collection[K, V]:
        """Return the entries of self whose key is not in other.

        Not symmetric: a.diff(b) and b.diff(a) generally differ.

        Examples:
            >>> a = Collection.from_iterable([('foo', 1), ('bar', 2)])
            >>> b = Collection.from_iterable([('foo', 3), ('baz', 4)])
            >>> a.diff(b)
            Collection({'bar': 2})
        """
        return Collection((key, value) for key, value in self._inner.items() if key not in other._inner)

    def sym_diff(self, other: Collection[K, V]) -> Collection[K, V]:
        """Return the entries whose key appears in exactly one of self and other.

        Entries from self come first, then entries from other.
        """
        result = self.diff(other)
        for key, value in other._inner.items():
            if key not in self._inner:
                result._inner[key] = value
        return result

    def intersect(self, other: Collection[K, V], resolve: Callable[[V, V, K], V]) -> Collection[K, V]:
        """Return the keys present in both collections.

        Args:
            other: Collection to intersect with.
            resolve: Called as resolve(value, other_value, key) for every
                shared key; its return value is stored.

        Returns:
            A new collection ordered like self.
        """
        result: Collection[K, V] = Collection()
        for key, value in self._inner.items():
            if key in other._inner:
                result._inner[key] = resolve(value, other._inner[key], key)
        return result

    def union(
        self,
        other: Collection[K, V],
        resolve: Callable[[V, V, K], V],
        *,
        equality: Equality | None = None,
    ) -> Collection[K, V]:
        """Return every key from both collections.

        Starts from a copy of self. For each entry of other: a new key is
        inserted as is; an existing key whose value differs is replaced
        by resolve(existing, incoming, key); an existing key with an equal
        value is left alone and resolve is not called.

        "Left alone" means the object from self is kept. Under
        Equality.VALUE that is observable for equal but distinct values:
        uniting {'k': 1} with {'k': True} keeps 1, not True.

        Args:
            other: Collection to merge in.
            resolve: Conflict resolver for shared keys with differing values.
            equality: How "differs" is decided. Equality.VALUE compares
                with ==, Equality.IDENTITY with `is`. Defaults to the
                configured union_equality.
        """
        mode = equality if equality is not None else get_config().union_equality
        result = Collection(self._inner)
        for key, value in other._inner.items():
            if key not in result._inner:
                result._inner[key] = value
                continue
            existing = result._inner[key]
            same = existing is value if mode is Equality.IDENTITY else existing == value
            if not same:
                result._inner[key] = resolve(existing, value, key)
        return result

    # --- Traversal ---

    def map[U](self, f: Callable[[V, K, Self], U]) -> Collection[K, U]:
        """Return a collection with the same keys and f(value, key, self) values."""
        return Collection((key, f(value, key, self)) for key, value in self._inner.items())

    def filter(self, predicate: Callable[[V, K, Self], bool]) -> Collection[K, V]:
        """Return a collection of the entries matching the predicate."""
        return Collection((key, value) for key, value in self._inner.items() if predicate(value, key, self))

    def find(self, predicate: Callable[[V, K, Self], bool]) -> Some[V] | NothingType:
        """Return the first value matching the predicate, or Nothing."""
        for key, value in self._inner.items():
            if predicate(value, key, self):
                return Some(value)
        return Nothing

    def find_key(self, predicate: Callable[[V, K, Self], bool]) -> Some[K] | NothingType:
        """Return the key of the first entry matching the predicate, or Nothing."""
        for key, value in self._inner.items():
            if predicate(value, key, self):
                return Some(key)
        return Nothing

    def every(self, predicate: Callable[[V, K, Self], bool]) -> bool:
        """Return True if every entry matches. True for an empty collection."""
        return all(predicate(value, key, self) for key, value in self._inner.items())

    def some(self, predicate: Callable[[V, K, Self], bool]) -> bool:
        """Return True if at least one entry matches."""
        return any(predicate(value, key, self) for key, value in self._inner.items())

    def reduce[U](self, f: Callable[[U, V, K, Self], U], initial: U) -> U:
        """Fold the entries in order with f(accumulator, value, key, self)."""
        accumulator = initial
        for key, value in self._inner.items():
            accumulator = f(accumulator, value, key, self)
        return accumulator

    def for_each(self, f: Callable[[V, K, Self], Any]) -> None:
        """Call f(value, key, self) for each entry."""
        for key, value in self._inner.items():
            f(value, key, self)

    def inspect(self, f: Callable[[V, K, Self], Any]) -> Self:
        """Like for_each, but returns the collection for chaining."""
        self.for_each(f)
        return self

    # --- Fallible operations ---

    def clone(self) -> Ok[Collection[K, V]] | Err[CloneError]:
        """Return a copy of the collection with every value deep-copied.

        Keys are shared, values are copied with copy.deepcopy.

        Returns:
            Ok(copy), or Err(CloneError) naming the first key whose value
            could not be copied.
        """
        result: Collection[K, V] = Collection()
        for key, value in self._inner.items():
            try:
                result._inner[key] = copy.deepcopy(value)
            except Exception as e:
                get_logger(__name__).debug('collection.clone_failed', key=repr(key), error=repr(e))
                return Err(CloneError(e, key=key))
        return Ok(result)

    def to_json(self) -> Ok[str] | Err[SerializeError]:
        """Serialize the entries as a JSON array of [key, value] pairs.

        Only entries that from_json() rebuilds equal are accepted. Values
        JSON would silently change (tuples, sets, dicts with non-string
        keys, datetimes, NaN) are rejected rather than written lossily.

        Returns:
            Ok(text), or Err(SerializeError) naming the first entry that
            cannot be encoded or would not decode back equal.

        Examples:
            >>> Collection.from_iterable([('foo', {'bar': 1})]).to_json()
            Ok(value='[["foo",{"bar":1}]]')
        """
        chunks: list[bytes] = []
        for key, value in self._inner.items():
            try:
                chunk = _encoder.encode((key, value))
                decoded_key, decoded_value = _decoder.decode(chunk)
                lossless = _freeze_key(decoded_key) == key and decoded_value == value
            except Exception as e:
                get_logger(__name__).debug('collection.to_json_failed', key=repr(key), error=repr(e))
                return Err(SerializeError(f'Cannot serialize entry {key!r}: {e}', key=key, cause=e))
            if not lossless:
                get_logger(__name__).debug('collection.to_json_failed', key=repr(key), error='lossy')
                return Err(SerializeError(f'Entry {key!r} would not survive a JSON round trip', key=key))
            chunks.append(chunk)
        return Ok((b'[' + b','.join(chunks) + b']').decode())

    # --- Dunder ---

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Collection):
            return self._inner == other._inner
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f'Collection({self._inner!r})'
