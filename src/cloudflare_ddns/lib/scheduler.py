"""
Fixed-interval scheduler for the polling loop
"""
import logging
import time
from typing import Callable, Optional

logger = logging.getLogger(__name__)

class IntervalScheduler:
    """Runs a task, then sleeps a fixed interval, until stopped"""

    def __init__(self, interval: float, sleep: Callable[[float], None] = time.sleep):
        """
        Initialize the scheduler

        Args:
            interval: Seconds to sleep between runs
            sleep: Sleep function (replaceable in tests)
        """
        if interval <= 0:
            raise ValueError(f"Interval must be positive, got {interval}")
        self.interval = interval
        self._sleep = sleep
        self._stopped = False

    def stop(self) -> None:
        """Stop after the current iteration"""
        self._stopped = True

    @property
    def stopped(self) -> bool:
        """Whether stop() has been called"""
        return self._stopped

    def run(self, task: Callable[[], object], iterations: Optional[int] = None) -> int:
        """
        Run task repeatedly

        Exceptions raised by the task propagate and end the loop.

        Args:
            task: Callable invoked once per iteration
            iterations: Stop after this many runs (None runs forever)

        Returns:
            Number of completed runs
        """
        count = 0
        while not self._stopped:
            task()
            count += 1
            if iterations is not None and count >= iterations:
                break
            if self._stopped:
                break
            logger.debug(f"Sleeping {self.interval} seconds")
            self._sleep(self.interval)
        return count
