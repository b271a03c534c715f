import logging
import time


class Stopwatch:
    """
    Times a block of code and logs the elapsed time at DEBUG level.

    Example usage:
        sw = Stopwatch("validate")
        # Some code to time
        sw.stop()

        # Or as a context manager
        with Stopwatch("validate"):
            ...
    """

    def __init__(self, label: str = "Time taken", log: bool = True):
        self.label = label
        self.log = log
        self.start_time = time.perf_counter()
        self.end_time = None

    def stop(self) -> float:
        self.end_time = time.perf_counter()
        elapsed = self.end_time - self.start_time

        if self.log:
            logging.debug(f"{self.label}: {elapsed * 1000:.2f}ms")

        return elapsed

    def __enter__(self):
        self.start_time = time.perf_counter()
        self.end_time = None
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.stop()
