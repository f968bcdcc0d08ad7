from .async_executor import AsyncHandler, AsyncOperationExecutor, CallbackAsyncHandler

__all__: list[str] = [
    "AsyncHandler",
    "AsyncOperationExecutor",
    "CallbackAsyncHandler",
]
