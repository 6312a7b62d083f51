"""Background dispatch of review updates.

The Update Review node does not wait for the service. Requests are handed to
a shared thread pool; results and failures are logged and then discarded.
"""

import atexit
import logging
import threading
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Any, Dict, Optional

from tmx_nodes.client.http import RiskServiceClient
from tmx_nodes.client.schemas import UpdateReviewRequest
from tmx_nodes.common.config.settings import get_settings
from tmx_nodes.common.exceptions import RemoteServiceError

logger = logging.getLogger(__name__)

# Module-level shared executor, created on first use
_shared_executor: Optional[ThreadPoolExecutor] = None
_executor_lock = threading.Lock()


def get_shared_executor() -> ThreadPoolExecutor:
    """Get or create the shared update executor."""
    global _shared_executor

    with _executor_lock:
        if _shared_executor is None:
            workers = get_settings().update_workers
            _shared_executor = ThreadPoolExecutor(
                max_workers=workers,
                thread_name_prefix="TmxUpdate"
            )
            atexit.register(shutdown_executor)
            logger.info(f"Created shared update executor with {workers} workers")
    return _shared_executor


def shutdown_executor() -> None:
    """Flush pending updates and stop the shared executor."""
    global _shared_executor
    with _executor_lock:
        if _shared_executor is not None:
            _shared_executor.shutdown(wait=True)
            logger.info("Shared update executor shutdown complete")
            _shared_executor = None


def _log_result(request_id: str, future: "Future[Dict[str, Any]]") -> None:
    exc = future.exception()
    if exc is None:
        logger.debug(f"Review update for request {request_id} accepted")
    elif isinstance(exc, RemoteServiceError):
        logger.warning(f"Review update for request {request_id} failed: {exc.message}")
    else:
        logger.error(f"Unexpected error sending review update for {request_id}: {exc}")


def dispatch_update(
    client: RiskServiceClient,
    request: UpdateReviewRequest,
    url: str,
    executor: Optional[Executor] = None,
) -> "Future[Dict[str, Any]]":
    """Send a review update without waiting for it.

    Args:
        client: Risk service client
        request: The update request
        url: Update endpoint
        executor: Executor to run on. Uses the shared executor if not given.

    Returns:
        Future of the parsed response. Callers normally ignore it.
    """
    executor = executor or get_shared_executor()
    future = executor.submit(client.update, request, url)
    future.add_done_callback(lambda f: _log_result(request.request_id, f))
    return future
