import logging
import time
from contextlib import contextmanager

from prometheus_client import Histogram

logger = logging.getLogger(__name__)

# Prometheus Metrics
STORE_OPERATION_SECONDS = Histogram(
    "photo_store_operation_seconds",
    "Time spent in a photo store operation",
    ["operation"],
)


@contextmanager
def track_duration(operation: str):
    """Observe the wall time of the wrapped block, failed or not."""
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed = time.perf_counter() - start
        STORE_OPERATION_SECONDS.labels(operation=operation).observe(elapsed)
        logger.debug(f"[{operation}] Time: {elapsed:.4f}s")
