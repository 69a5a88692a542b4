from pathlib import Path
from threading import Lock, RLock

from helpdesk.core.config import get_settings

_registry_lock = Lock()
_store_locks: dict[Path, RLock] = {}


def get_data_file() -> Path:
    return get_settings().data_file


def get_store_lock(path: Path) -> RLock:
    """Return the process-wide lock guarding the store file at ``path``.

    Every store instance pointing at the same file shares one lock, so a
    load-mutate-save cycle from one request cannot interleave with another.
    """
    key = path.resolve()
    with _registry_lock:
        lock = _store_locks.get(key)
        if lock is None:
            lock = RLock()
            _store_locks[key] = lock
        return lock
