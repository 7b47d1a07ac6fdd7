"""Observer pattern with weak registration: dead observers drop out on notify."""

from __future__ import annotations

import logging
import threading
import weakref
from abc import ABC, abstractmethod
from typing import List, Optional

_log = logging.getLogger(__name__)


class Observer(ABC):
    """Something that wants to hear when an ``Observable`` notifies."""

    subject: Optional["Observable"] = None

    @abstractmethod
    def update(self) -> None:
        """React to a notification."""

    def observe(self, subject: "Observable") -> None:
        """Register with ``subject`` and remember it."""
        subject.register(self)
        self.subject = subject


class Observable:
    """Holds observers weakly so that observing never keeps an object alive."""

    def __init__(self) -> None:
        self._observers: List[weakref.ReferenceType] = []
        self._lock = threading.RLock()

    def register(self, observer: Observer) -> None:
        with self._lock:
            self._observers.append(weakref.ref(observer))

    def notify(self) -> None:
        """Call ``update`` on every live observer and forget the dead ones."""
        with self._lock:
            for ref in list(self._observers):
                obj = ref()
                if obj is not None:
                    obj.update()
            alive = [ref for ref in self._observers if ref() is not None]
            if len(alive) != len(self._observers):
                _log.debug("auto unregister %d observer(s)", len(self._observers) - len(alive))
            self._observers = alive

    def __len__(self) -> int:
        """Number of registrations, including dead ones not yet pruned by ``notify``."""
        with self._lock:
            return len(self._observers)