"""A factory that shares live objects by key and forgets them once unused."""

from __future__ import annotations

import logging
import threading
import weakref
from typing import Dict, List

_log = logging.getLogger(__name__)


class Stock:
    """A named item handed out by ``StockFactory``."""

    def __init__(self, name: str) -> None:
        self.name = name

    @property
    def key(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Stock({self.name!r})"


class StockFactory:
    """Returns one shared ``Stock`` per key while anyone still holds it."""

    def __init__(self) -> None:
        self._stocks: Dict[str, weakref.ReferenceType] = {}
        self._lock = threading.RLock()

    def get_stock(self, key: str) -> Stock:
        """Return the live stock for ``key``, creating it if there is none."""
        with self._lock:
            ref = self._stocks.get(key)
            stock = ref() if ref is not None else None
            if stock is None:
                stock = Stock(key)
                self._stocks[key] = weakref.ref(stock, _make_cleanup(weakref.ref(self), key))
            return stock

    def keys(self) -> List[str]:
        """Keys of the stocks currently held, in sorted order."""
        with self._lock:
            return sorted(self._stocks)

    def _forget(self, key: str, ref: weakref.ReferenceType) -> None:
        with self._lock:
            if self._stocks.get(key) is ref:
                del self._stocks[key]


def _make_cleanup(factory_ref: weakref.ReferenceType, key: str):
    def cleanup(ref: weakref.ReferenceType) -> None:
        _log.debug("stock %r released", key)
        factory = factory_ref()
        if factory is not None:
            factory._forget(key, ref)

    return cleanup