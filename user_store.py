import copy
import threading


class UserStore:
    """Append-only, in-memory list of user records.

    A record's position in the list is its id: it is assigned on insert and
    never changes, since records are never removed or replaced.
    """

    def __init__(self):
        self._users = []
        self._lock = threading.Lock()

    def add(self, record: dict) -> int:
        # Deep copy so nested values in the caller's dict can't leak into the store
        with self._lock:
            self._users.append(copy.deepcopy(record))
            return len(self._users) - 1

    def exists(self, position: int) -> bool:
        with self._lock:
            return 0 <= position < len(self._users)

    def get(self, position: int) -> dict:
        with self._lock:
            # Negative positions are never occupied, no wrap-around from the end
            if not 0 <= position < len(self._users):
                raise IndexError(f"No user at position {position}")
            return copy.deepcopy(self._users[position])

    def __len__(self):
        with self._lock:
            return len(self._users)
