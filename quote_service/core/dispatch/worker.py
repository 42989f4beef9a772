"""
Local queue worker.

Polls a DurableQueue and runs the dispatcher on one message at a time,
mapping each DispatchResult onto acknowledge (success) or
release_with_failure (failure). An attempt that exceeds the dispatcher
timeout counts as failed.

Dependencies: concurrent.futures (stdlib), quote_service.core
System role: Dispatcher host for local development (Lambda is the deployed host)
"""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError

from quote_service.core.dispatch.dispatcher import DispatchResult, NotificationDispatcher
from quote_service.core.exceptions import LeaseNotFoundError, QueueError
from quote_service.core.queue.base import DurableQueue
from quote_service.models.queue_message import QueueMessage

logger = logging.getLogger(__name__)


class QueueWorker:
    """Single-consumer loop between a durable queue and the dispatcher."""

    def __init__(
        self,
        queue: DurableQueue,
        dispatcher: NotificationDispatcher,
        timeout_seconds: float = 30.0,
    ) -> None:
        self.queue = queue
        self.dispatcher = dispatcher
        self.timeout_seconds = timeout_seconds

    def run_once(self) -> DispatchResult | None:
        """
        Lease and process at most one message.

        Returns:
            DispatchResult | None: Outcome, or None when nothing was visible
        """
        messages = self.queue.receive(batch_size=1)
        if not messages:
            return None

        message = messages[0]
        result = self._dispatch_with_timeout(message)
        self._settle(message, result)
        return result

    def drain(self, max_messages: int | None = None) -> list[DispatchResult]:
        """
        Process messages until the queue has nothing visible.

        Args:
            max_messages: Stop after this many attempts (unbounded if None)

        Returns:
            list[DispatchResult]: One result per attempt, in order
        """
        results: list[DispatchResult] = []
        while max_messages is None or len(results) < max_messages:
            result = self.run_once()
            if result is None:
                break
            results.append(result)
        return results

    def run_forever(
        self,
        stop_event: threading.Event | None = None,
        poll_interval_seconds: float = 1.0,
    ) -> None:
        """
        Poll the queue until stop_event is set or the process is interrupted.

        Args:
            stop_event: Set by the owner to end the loop
            poll_interval_seconds: Idle wait when nothing is visible
        """
        stop_event = stop_event or threading.Event()
        logger.info("run_forever - Worker started", extra={"timeout_seconds": self.timeout_seconds})
        try:
            while not stop_event.is_set():
                try:
                    idle = self.run_once() is None
                except QueueError as e:
                    logger.error("run_forever - QueueError: %s", e)
                    idle = True
                if idle:
                    stop_event.wait(poll_interval_seconds)
        except KeyboardInterrupt:
            logger.info("run_forever - Interrupted")
        logger.info("run_forever - Worker stopped")

    def _dispatch_with_timeout(self, message: QueueMessage) -> DispatchResult:
        executor = ThreadPoolExecutor(max_workers=1)
        try:
            future = executor.submit(self.dispatcher.process, message.message_id, message.body)
            return future.result(timeout=self.timeout_seconds)
        except FutureTimeoutError:
            logger.error(
                "_dispatch_with_timeout - Attempt exceeded %.1fs",
                self.timeout_seconds,
                extra={"message_id": message.message_id},
            )
            return DispatchResult.failed(
                message.message_id,
                f"Dispatch timed out after {self.timeout_seconds}s",
            )
        finally:
            # A timed-out attempt keeps running in the background thread
            executor.shutdown(wait=False)

    def _settle(self, message: QueueMessage, result: DispatchResult) -> None:
        try:
            if result.success:
                self.queue.acknowledge(message.receipt_handle)
            else:
                self.queue.release_with_failure(message.receipt_handle)
        except LeaseNotFoundError as e:
            # Lease already expired; the queue has counted the attempt itself
            logger.warning(
                "_settle - %s",
                e,
                extra={"message_id": message.message_id, "success": result.success},
            )


if __name__ == "__main__":
    from quote_service.api.deps.dependencies import get_service_cache
    from quote_service.configs import get_settings
    from quote_service.observability import configure_logging

    configure_logging(get_settings().log_level)
    get_service_cache().worker.run_forever()
