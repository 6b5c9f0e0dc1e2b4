"""Owned interval scheduler with explicit start/stop.

Replaces free-floating page timers: jobs are registered up front, ``start()``
fires the on-load jobs, ``tick()`` runs whatever is due against an injectable
clock, and ``stop()`` ends the loop. Tests drive ``tick()`` with a fake clock.
"""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class Job:
    name: str
    interval: float
    fn: Callable[[], object]
    run_immediately: bool = True
    next_run: float = 0.0
    runs: int = 0
    failures: int = 0


class Scheduler:
    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self.clock = clock
        self._jobs: list[Job] = []
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    @property
    def jobs(self) -> list[Job]:
        return list(self._jobs)

    def add_job(
        self,
        name: str,
        interval: float,
        fn: Callable[[], object],
        run_immediately: bool = True,
    ) -> Job:
        if interval <= 0:
            raise ValueError(f"Job {name!r} interval must be positive")
        if self._running:
            raise RuntimeError("Cannot add jobs to a running scheduler")
        if any(j.name == name for j in self._jobs):
            raise ValueError(f"Duplicate job name: {name}")
        job = Job(name=name, interval=interval, fn=fn, run_immediately=run_immediately)
        self._jobs.append(job)
        return job

    def start(self) -> None:
        """Arm every job; jobs with run_immediately fire now."""
        if self._running:
            return
        self._running = True
        now = self.clock()
        for job in self._jobs:
            job.next_run = now if job.run_immediately else now + job.interval
        logger.info("Scheduler started with %d jobs", len(self._jobs))
        self.tick()

    def stop(self) -> None:
        if self._running:
            self._running = False
            logger.info("Scheduler stopped")

    def tick(self) -> list[str]:
        """Run each due job once, in registration order. Returns names of jobs run."""
        if not self._running:
            return []
        now = self.clock()
        ran = []
        for job in self._jobs:
            if now < job.next_run:
                continue
            job.runs += 1
            try:
                job.fn()
            except Exception:
                job.failures += 1
                logger.exception("Job %s failed (run #%d)", job.name, job.runs)
            # Missed intervals collapse into one run rather than a burst
            job.next_run = now + job.interval
            ran.append(job.name)
        return ran

    def run_forever(self, sleep: Callable[[float], None] = time.sleep) -> None:
        """Start (if needed) and tick once a second until stop() is called."""
        self.start()
        try:
            while self._running:
                sleep(1)
                self.tick()
        except KeyboardInterrupt:
            logger.info("Scheduler interrupted by keyboard")
        finally:
            self.stop()
