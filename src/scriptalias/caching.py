from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from typing import Any, Hashable

from .codegen.base import AliasGenerator
from .errors import InvalidArgumentError
from .model import AliasDescriptor
from .writer import IndentedWriter

logger = logging.getLogger(__name__)

DEFAULT_MAX_ENTRIES = 4096


def _cache_key(descriptor: AliasDescriptor) -> Hashable:
    # `1 == True == 1.0` in Python; default literals must also match by type and spelling.
    defaults: tuple[Any, ...] = tuple((type(p.default), repr(p.default)) for p in descriptor.parameters)
    return (descriptor, defaults)


class CachingAliasGenerator(AliasGenerator):
    """Memoizes another generator's output per descriptor.

    Descriptors are immutable and generation is pure, so descriptors with the
    same fields (default literals compared by type and spelling) share one
    rendering. At most `max_entries` renderings are kept, least recently
    used first out; `None` keeps every rendering until `clear()`.
    """

    def __init__(self, inner: AliasGenerator, *, max_entries: int | None = DEFAULT_MAX_ENTRIES):
        if inner is None:
            raise InvalidArgumentError("inner generator is required")
        if max_entries is not None and max_entries < 1:
            raise InvalidArgumentError("max_entries must be at least 1")
        super().__init__(indent=inner.indent)
        self._inner = inner
        self._max_entries = max_entries
        self._cache: OrderedDict[Hashable, str] = OrderedDict()
        self._lock = threading.Lock()

    def render(self, descriptor: AliasDescriptor) -> str:
        if descriptor is None:
            raise InvalidArgumentError("descriptor is required")
        key = _cache_key(descriptor)
        with self._lock:
            text = self._cache.get(key)
            if text is not None:
                self._cache.move_to_end(key)
        if text is not None:
            logger.debug("alias cache hit: %s", descriptor.name)
            return text

        logger.debug("alias cache miss: %s", descriptor.name)
        text = self._inner.render(descriptor)
        with self._lock:
            # Keep the first rendering if another thread got there first.
            text = self._cache.setdefault(key, text)
            self._cache.move_to_end(key)
            while self._max_entries is not None and len(self._cache) > self._max_entries:
                self._cache.popitem(last=False)
        return text

    def emit(self, writer: IndentedWriter, descriptor: AliasDescriptor) -> None:
        writer.write(self.render(descriptor))

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)
