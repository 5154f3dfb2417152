"""
Lightweight EventBus singleton used by the application services.

This is the explicit "changed" signal consumers (UI, notification
scheduling) subscribe to instead of observing mutable state.

Key invariants (enforced by call sites + tests):
  - Event topics come from enums in plantcare.enums.events (PlantCareEvent).
  - Payloads are Pydantic models in plantcare.schemas or dataclasses.
  - Subscribers always receive a plain dict payload.
"""
import logging
import threading
from collections import defaultdict
from dataclasses import asdict, is_dataclass
from enum import Enum
from queue import Full, Queue
from typing import Any, Callable, Dict, Hashable, Iterable, Optional

from pydantic import BaseModel

from plantcare.config import load_config
from plantcare.enums.events import PlantCareEvent

logger = logging.getLogger(__name__)


class EventBus:
    """
    Handles event-driven communication across modules.

    Singleton so publishers/subscribers share the same routing table.
    """

    _instance: Optional["EventBus"] = None
    _lock = threading.Lock()

    def __new__(cls) -> "EventBus":
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    config = load_config()
                    instance = super(EventBus, cls).__new__(cls)
                    instance.subscribers = defaultdict(list)
                    instance._queue_size = config.eventbus_queue_size
                    instance._queue = Queue(maxsize=instance._queue_size)
                    instance._worker_pool_size = config.eventbus_worker_count
                    instance._workers_started = False
                    instance._dropped_events = 0
                    instance.lock = threading.Lock()
                    cls._instance = instance
        return cls._instance

    def __init__(self) -> None:
        if not hasattr(self, "subscribers"):
            self.subscribers: Dict[Hashable, list[Callable[[Any], None]]] = defaultdict(list)
        if not getattr(self, "_workers_started", False):
            self._start_workers()

    def _start_workers(self) -> None:
        """Spin up a small worker pool to avoid unbounded thread creation."""
        with self.lock:
            if getattr(self, "_workers_started", False):
                return
            self._workers: list[threading.Thread] = []
            for _ in range(self._worker_pool_size):
                worker = threading.Thread(target=self._worker_loop, daemon=True)
                worker.start()
                self._workers.append(worker)
            self._workers_started = True
            logger.info(
                "EventBus workers started (pool=%s queue=%s)",
                self._worker_pool_size,
                self._queue_size,
            )

    def subscribe(self, event_name: PlantCareEvent | str, callback: Callable[[Any], None]) -> Callable[[], None]:
        """
        Subscribes a callback function to an event.

        Args:
            event_name: The enum topic (preferred) or raw string.
            callback: Function to call when the event occurs.

        Returns:
            A function that removes the subscription.
        """
        name = event_name.value if isinstance(event_name, Enum) else event_name
        with self.lock:
            self.subscribers[name].append(callback)

        def unsubscribe() -> None:
            with self.lock:
                callbacks = self.subscribers.get(name, [])
                try:
                    callbacks.remove(callback)
                except ValueError:
                    return

        return unsubscribe

    def _worker_loop(self) -> None:
        """Worker thread loop to process events from the queue."""
        while True:
            event_name, callback, payload = self._queue.get()
            try:
                callback(payload)
            except Exception as exc:  # pragma: no cover - subscriber bug
                logger.error("Error in callback for event %s: %s", event_name, exc)
            finally:
                self._queue.task_done()

    def publish(self, event_name: PlantCareEvent | str, data: Any | None = None) -> None:
        """
        Publishes an event, queueing every subscribed callback.

        Args:
            event_name: The enum topic (preferred) or raw string.
            data: Payload object (Pydantic model, dataclass, or dict/primitive).
        """
        name = event_name.value if isinstance(event_name, Enum) else event_name

        if isinstance(data, BaseModel):
            payload: Any = data.model_dump(mode="json")
        elif is_dataclass(data):
            payload = asdict(data)
        else:
            payload = data

        with self.lock:
            callbacks: Iterable[Callable[[Any], None]] = list(self.subscribers.get(name, []))
        for callback in callbacks:
            try:
                self._queue.put_nowait((name, callback, payload))
            except Full:
                self._dropped_events += 1
                logger.warning(
                    "EventBus dropping %s (queue_size=%d, total_dropped=%d)",
                    name,
                    self._queue_size,
                    self._dropped_events,
                )
                break

    def wait_until_idle(self) -> None:
        """Block until every queued callback has run."""
        self._queue.join()

    def get_metrics(self) -> Dict[str, Any]:
        """Return lightweight metrics for logging."""
        return {
            "queue_depth": self._queue.qsize(),
            "queue_size": self._queue_size,
            "dropped_events": self._dropped_events,
            "subscribers": sum(len(values) for values in self.subscribers.values()),
        }
