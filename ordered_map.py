from typing import TypeVar, Generic, Dict, List, Mapping, Any, Iterable, Iterator, Tuple, Optional, Union
import threading
from map_config import config

K = TypeVar('K')
V = TypeVar('V')

# The "no mapping" marker. It is distinct from every value that can be stored, including None.
class _Absent():
    _instance: Optional['_Absent'] = None

    def __new__(cls) -> '_Absent':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return 'ABSENT'

ABSENT: Any = _Absent()

class OutOfRangeError(IndexError):
    def __init__(self, index: int, size: int) -> None:
        super().__init__(f'index {index} is out of range for size {size}')
        self.index = index
        self.size = size

# A map that remembers the order in which its keys were first inserted.
# Values live in a dict, the order lives in a list of keys.
# Every public method holds the lock for its whole duration.
# The underscored helpers assume the lock is already held.
class OrderedMap(Generic[K, V]):
    def __init__(self, initial_capacity: Optional[int] = None) -> None:
        if initial_capacity is None:
            initial_capacity = config['initial_capacity']
        if initial_capacity < 0:
            raise ValueError(f'negative capacity: {initial_capacity}')
        self._keys: List[K] = []
        self._vals: Dict[K, V] = {}
        self._capacity: int = initial_capacity
        self._lock = threading.Lock()

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= len(self._keys):
            raise OutOfRangeError(index, len(self._keys))

    def _put(self, key: K, val: V) -> V:
        if key is None:
            raise ValueError('None is not a valid key')
        if key in self._vals:
            prev = self._vals[key]
        else:
            prev = ABSENT
            self._keys.append(key)
            self._capacity = max(self._capacity, len(self._keys))
        self._vals[key] = val
        return prev

    def _remove(self, key: K) -> V:
        if key not in self._vals:
            return ABSENT
        self._keys.remove(key)
        return self._vals.pop(key)

    # Maps key to val. Returns the previous value, or ABSENT if key was new.
    # A key that is already present keeps its position.
    def put(self, key: K, val: V) -> V:
        with self._lock:
            return self._put(key, val)

    # Puts every entry of a mapping (or iterable of pairs) in source order.
    # The source is read before taking the lock, so it may itself read this map.
    def put_all(self, source: Union[Mapping[K, V], Iterable[Tuple[K, V]]]) -> None:
        if isinstance(source, (Mapping, OrderedMap)):
            pairs = list(source.items())
        else:
            pairs = list(source)
        with self._lock:
            for key, val in pairs:
                self._put(key, val)

    # Returns the value for key, or default (ABSENT unless given) if there is no mapping
    def get(self, key: K, default: Any = ABSENT) -> V:
        with self._lock:
            return self._vals.get(key, default)

    # Returns a snapshot of the keys in insertion order
    def keys(self) -> List[K]:
        with self._lock:
            return list(self._keys)

    # Returns a snapshot of the values, lined up with keys()
    def values(self) -> List[V]:
        with self._lock:
            return [ self._vals[k] for k in self._keys ]

    def items(self) -> List[Tuple[K, V]]:
        with self._lock:
            return [ (k, self._vals[k]) for k in self._keys ]

    # Returns the value of the key at the specified position
    def element_at(self, index: int) -> V:
        with self._lock:
            self._check_index(index)
            return self._vals[self._keys[index]]

    # Returns the key at the specified position
    def key_at(self, index: int) -> K:
        with self._lock:
            self._check_index(index)
            return self._keys[index]

    # Returns the position of key in insertion order, or -1 if it is not present
    def index_of(self, key: K) -> int:
        with self._lock:
            if key not in self._vals:
                return -1
            return self._keys.index(key)

    # Removes key and returns its value, or ABSENT if it was not present.
    # Keys after it shift down by one.
    def remove(self, key: K) -> V:
        with self._lock:
            return self._remove(key)

    # Removes the entry at the specified position and returns its value
    def remove_at(self, index: int) -> V:
        with self._lock:
            self._check_index(index)
            key = self._keys.pop(index)
            return self._vals.pop(key)

    def clear(self) -> None:
        with self._lock:
            self._keys.clear()
            self._vals.clear()

    def size(self) -> int:
        with self._lock:
            return len(self._keys)

    def is_empty(self) -> bool:
        return self.size() == 0

    # Raises the capacity hint. This never changes the contents.
    def ensure_capacity(self, capacity: int) -> None:
        with self._lock:
            self._capacity = max(self._capacity, capacity)

    def capacity(self) -> int:
        with self._lock:
            return self._capacity

    def contains_key(self, key: K) -> bool:
        with self._lock:
            return key in self._vals

    def contains_value(self, val: Any) -> bool:
        with self._lock:
            return any(v == val for v in self._vals.values())

    def to_mapping(self) -> Dict[K, V]:
        with self._lock:
            return { k:self._vals[k] for k in self._keys }

    @staticmethod
    def from_mapping(m: Union[Mapping[K, V], 'OrderedMap[K,V]']) -> 'OrderedMap[K,V]':
        om: 'OrderedMap[K,V]' = OrderedMap(len(m))
        om.put_all(m)
        return om

    @staticmethod
    def from_pairs(pairs: Iterable[Tuple[K, V]]) -> 'OrderedMap[K,V]':
        om: 'OrderedMap[K,V]' = OrderedMap()
        om.put_all(pairs)
        return om

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: Any) -> bool:
        return self.contains_key(key)

    def __iter__(self) -> Iterator[K]:
        return iter(self.keys())

    def __getitem__(self, key: K) -> V:
        with self._lock:
            return self._vals[key]

    def __setitem__(self, key: K, val: V) -> None:
        self.put(key, val)

    def __delitem__(self, key: K) -> None:
        with self._lock:
            if key not in self._vals:
                raise KeyError(key)
            self._remove(key)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, OrderedMap):
            return NotImplemented
        return self.items() == other.items()

    __hash__ = None # type: ignore

    def __repr__(self) -> str:
        body = ', '.join(f'{k!r}: {v!r}' for k, v in self.items())
        return f'OrderedMap({{{body}}})'
