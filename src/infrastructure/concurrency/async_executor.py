"""
Run synchronous operations on a worker pool.

AsyncOperationExecutor is the single adapter behind every ``*_async`` method:
it enqueues the blocking call and hands back a Future straight away. When a
completion handler is supplied, exactly one of its callbacks runs once on the
worker thread before the future is resolved.
"""

from abc import ABC, abstractmethod
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Callable, Generic, Optional, TypeVar

from domain.base.ports import LoggingPort
from infrastructure.adapters.logging_adapter import LoggingAdapter

RequestT = TypeVar("RequestT")
ResultT = TypeVar("ResultT")

DEFAULT_MAX_WORKERS = 50


class AsyncHandler(ABC, Generic[RequestT, ResultT]):
    """Completion callbacks for an asynchronous operation."""

    @abstractmethod
    def on_error(self, exception: Exception) -> None:
        """Called when the operation raised."""

    @abstractmethod
    def on_success(self, request: RequestT, result: ResultT) -> None:
        """Called with the request and its result when the operation completed."""


class CallbackAsyncHandler(AsyncHandler[RequestT, ResultT]):
    """AsyncHandler built from plain callables; a missing callable is a no-op."""

    def __init__(
        self,
        on_success: Optional[Callable[[RequestT, ResultT], None]] = None,
        on_error: Optional[Callable[[Exception], None]] = None,
    ) -> None:
        self._on_success = on_success
        self._on_error = on_error

    def on_error(self, exception: Exception) -> None:
        if self._on_error is not None:
            self._on_error(exception)

    def on_success(self, request: RequestT, result: ResultT) -> None:
        if self._on_success is not None:
            self._on_success(request, result)


class AsyncOperationExecutor:
    """Submits synchronous operations to an executor and signals completion."""

    def __init__(
        self,
        executor: Optional[Executor] = None,
        max_workers: int = DEFAULT_MAX_WORKERS,
        logger: Optional[LoggingPort] = None,
    ) -> None:
        """
        Args:
            executor: Executor to run operations on; a ThreadPoolExecutor is created when omitted
            max_workers: Worker count for the created ThreadPoolExecutor
            logger: Logging port, defaults to the package logger
        """
        self._logger = logger or LoggingAdapter("awsbind.async")
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="awsbind-async"
        )

    @property
    def executor(self) -> Executor:
        return self._executor

    def submit(
        self,
        operation: Callable[[RequestT], ResultT],
        request: RequestT,
        async_handler: Optional[AsyncHandler[RequestT, ResultT]] = None,
    ) -> "Future[ResultT]":
        """
        Enqueue ``operation(request)`` and return its future immediately.

        Cancelling the returned future only prevents the call if it has not
        started yet; a running operation is never interrupted.
        """
        operation_name = getattr(operation, "__name__", repr(operation))
        self._logger.debug("Submitting %s", operation_name)
        return self._executor.submit(self._call, operation, operation_name, request, async_handler)

    def _call(
        self,
        operation: Callable[[RequestT], ResultT],
        operation_name: str,
        request: RequestT,
        async_handler: Optional[AsyncHandler[RequestT, ResultT]],
    ) -> ResultT:
        try:
            result = operation(request)
        except Exception as e:
            self._logger.debug("%s failed: %s", operation_name, e)
            if async_handler is not None:
                async_handler.on_error(e)
            raise
        if async_handler is not None:
            async_handler.on_success(request, result)
        return result

    def shutdown(self, wait: bool = True) -> None:
        """Shut down the executor if this instance created it."""
        if self._owns_executor:
            self._executor.shutdown(wait=wait)

    def __enter__(self) -> "AsyncOperationExecutor":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.shutdown()
