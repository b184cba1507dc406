import contextlib
import time

from circuitdist import my_logging


@contextlib.contextmanager
def time_measure(key):
    """Log the wall clock time spent inside the context as DATA record 'time_<key>' (also if the context raises)."""
    start = time.time()
    try:
        yield
    finally:
        my_logging.data("time_" + key, time.time() - start)
