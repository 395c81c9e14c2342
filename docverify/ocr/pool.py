import queue
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Generic, TypeVar

from docverify.ocr.exceptions import EngineUnavailableError

T = TypeVar("T")


class EnginePool(Generic[T]):
    """Bounded pool of expensive OCR engines with exclusive checkout.

    Engines are created lazily, at most ``size`` of them. A checked-out engine
    is used by exactly one caller and goes back to the pool when the ``with``
    block exits, including on exceptions.
    """

    def __init__(
        self,
        factory: Callable[[], T],
        size: int,
        checkout_timeout_seconds: float | None = 60.0,
    ) -> None:
        if size < 1:
            raise ValueError(f"Engine pool size must be positive, got {size}")
        self._factory = factory
        self._size = size
        self._timeout = checkout_timeout_seconds
        self._idle: queue.LifoQueue[T] = queue.LifoQueue()
        self._created = 0
        self._lock = threading.Lock()

    @property
    def created(self) -> int:
        return self._created

    @contextmanager
    def checkout(self) -> Iterator[T]:
        engine = self._acquire()
        try:
            yield engine
        finally:
            self._idle.put(engine)

    def _acquire(self) -> T:
        try:
            return self._idle.get_nowait()
        except queue.Empty:
            pass

        with self._lock:
            can_create = self._created < self._size
            if can_create:
                self._created += 1

        if can_create:
            return self._create()

        try:
            return self._idle.get(timeout=self._timeout)
        except queue.Empty as exc:
            raise EngineUnavailableError(
                f"No OCR engine became available within {self._timeout}s"
            ) from exc

    def _create(self) -> T:
        try:
            return self._factory()
        except Exception as exc:
            with self._lock:
                self._created -= 1
            if isinstance(exc, EngineUnavailableError):
                raise
            raise EngineUnavailableError(f"OCR engine initialization failed: {exc}") from exc
