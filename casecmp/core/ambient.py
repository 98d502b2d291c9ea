"""Ambient locale slot.

Holds the "current" locale that dynamic comparers follow. The default is
process-wide and set explicitly (normally from Settings at startup);
scoped overrides apply only to the calling thread or asyncio task.
"""

import logging
import threading
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from types import MappingProxyType

from .ports import LocaleProviderPort

logger = logging.getLogger(__name__)

# Scoped overrides for every LocaleContext, keyed by instance.
_OVERRIDES: ContextVar[Mapping[object, str]] = ContextVar(
    "casecmp_locale_overrides", default=MappingProxyType({})
)


class LocaleContext(LocaleProviderPort):
    """Process-wide ambient locale with per-context overrides.

    Reads are safe from any thread. The comparer only reads from this
    object; callers own every write.
    """

    def __init__(self, default: str = ""):
        self._lock = threading.Lock()
        self._default = default
        self._key = object()

    @property
    def default(self) -> str:
        with self._lock:
            return self._default

    def set_default(self, name: str) -> str:
        """Replace the process-wide default.

        Args:
            name: New default locale identifier ("" for invariant).

        Returns:
            The previous default.
        """
        if name is None:
            raise ValueError("name must not be None")
        with self._lock:
            previous, self._default = self._default, name
        logger.debug(f"Ambient default locale changed from {previous!r} to {name!r}")
        return previous

    @contextmanager
    def use(self, name: str) -> Iterator[str]:
        """Temporarily make `name` the current locale for this context.

        Other threads keep seeing their own value. The previous value is
        restored on exit, even if the block raises.
        """
        if name is None:
            raise ValueError("name must not be None")
        overrides = {**_OVERRIDES.get(), self._key: name}
        token = _OVERRIDES.set(MappingProxyType(overrides))
        try:
            yield name
        finally:
            _OVERRIDES.reset(token)

    def current_locale(self) -> str:
        override = _OVERRIDES.get().get(self._key)
        if override is not None:
            return override
        return self.default

    def __repr__(self) -> str:
        return f"LocaleContext(current={self.current_locale()!r})"
