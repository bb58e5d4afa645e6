import threading
from typing import Dict, Iterator, Optional

from treewalk.errors import EnvironmentBusy
from treewalk.types import check_int


class Environment:
    """Variable mapping for one execution: identifier name -> integer.

    Lookups of unbound names yield 0 rather than failing. An Environment is
    owned by a single execution at a time; ``acquire``/``release`` mark it
    busy for the duration of a run.
    """
    def __init__(self, values: Optional[Dict[str, int]] = None):
        self.values: Dict[str, int] = {}
        self._lock = threading.Lock()
        for name, value in (values or {}).items():
            self.set(name, value)

    def get(self, name: str) -> int:
        return self.values.get(name, 0)

    def set(self, name: str, value: int):
        self.values[name] = check_int(value)

    def to_dict(self) -> Dict[str, int]:
        return dict(self.values)

    def acquire(self):
        if not self._lock.acquire(blocking=False):
            raise EnvironmentBusy()

    def release(self):
        self._lock.release()

    def __getitem__(self, name: str) -> int:
        return self.values[name]

    def __contains__(self, name: object) -> bool:
        return name in self.values

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def __repr__(self) -> str:
        return f"Environment({self.values!r})"
