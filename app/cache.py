# app/cache.py

import logging
import threading
from typing import Any, Callable, Dict, Optional

logger = logging.getLogger(__name__)


class ViewCache:
    """
    In-process cache of rendered listing payloads, keyed by request path.

    revalidate_path drops the path itself and everything below it, so
    invalidating /dashboard/invoices also drops /dashboard/invoices/<id>/edit.

    Every revalidation bumps a generation counter. A render that started
    before the bump is returned to its caller but never stored.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, Any] = {}
        self._generation = 0
        self._lock = threading.Lock()

    def get(self, path: str) -> Optional[Any]:
        with self._lock:
            return self._entries.get(path)

    def set(self, path: str, value: Any) -> None:
        with self._lock:
            self._entries[path] = value

    def get_or_render(self, path: str, render: Callable[[], Any]) -> Any:
        with self._lock:
            cached = self._entries.get(path)
            generation = self._generation
        if cached is not None:
            return cached

        value = render()

        with self._lock:
            if self._generation == generation:
                self._entries[path] = value
            else:
                logger.debug("Discarded stale render of %s", path)
        return value

    def revalidate_path(self, path: str) -> None:
        prefix = path.rstrip("/") + "/"
        with self._lock:
            self._generation += 1
            stale = [
                key for key in self._entries
                if key == path or key.startswith(prefix)
            ]
            for key in stale:
                del self._entries[key]
        logger.info("Revalidated %s (%d cached view(s) dropped)", path, len(stale))

    def clear(self) -> None:
        with self._lock:
            self._generation += 1
            self._entries.clear()
