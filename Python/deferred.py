"""
A deferred cell is a memoizing thunk: a zero-argument computation plus a slot
for its result.

The computation runs at most once, on the first call to `force()`, and never
at construction time. Later calls return the cached result. If the computation
raises, the exception is cached too and re-raised on every later force; the
computation is not attempted again.

The first force is serialized by a lock owned by the cell, so threads racing
to force the same cell observe a single execution and the same outcome.
"""

import logging
import threading

logger = logging.getLogger(__name__)


class Deferred:
    def __init__(self, computation):
        self._computation = computation
        self._forced = False
        self._running = False
        self._value = None
        self._error = None
        self._lock = threading.RLock()

    @classmethod
    def of(cls, value):
        """cell that is already evaluated to value"""
        cell = cls(None)
        cell._value = value
        cell._forced = True
        return cell

    @property
    def is_forced(self):
        return self._forced

    @property
    def is_poisoned(self):
        return self._forced and self._error is not None

    def force(self):
        if not self._forced:
            with self._lock:
                if not self._forced:
                    self._evaluate()
                    if self._error is not None:
                        raise self._error
                    return self._value
        if self._error is not None:
            logger.debug("re-raising cached failure of %r", self)
            raise self._error
        return self._value

    def peek(self, default=None):
        """the cached value, or default if the cell holds no value yet"""
        if self._forced and self._error is None:
            return self._value
        return default

    def _evaluate(self):
        if self._running:
            raise RuntimeError("deferred computation forced itself")
        self._running = True
        try:
            self._value = self._computation()
        except Exception as error:
            logger.debug("deferred computation failed, poisoning cell: %r", error)
            self._error = error
        finally:
            self._running = False
        self._computation = None
        self._forced = True

    def __call__(self):
        return self.force()

    def __repr__(self):
        if not self._forced:
            return 'Deferred(?)'
        if self._error is not None:
            return 'Deferred(<failed: {!r}>)'.format(self._error)
        return 'Deferred({!r})'.format(self._value)
