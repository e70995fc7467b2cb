"""Round scheduler using APScheduler."""

from __future__ import annotations

import logging
import random
import threading
from collections.abc import Callable
from types import TracebackType

import logfire
from apscheduler.events import EVENT_JOB_MAX_INSTANCES, JobSubmissionEvent
from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger

from croupier.table.exceptions import EmptyRosterError
from croupier.table.models import MAX_NUMBER, RoundReport
from croupier.table.registry import PlayerRegistry
from croupier.table.resolver import resolve

logger = logging.getLogger(__name__)

Reporter = Callable[[RoundReport], None]

JOB_ID = "round-resolution"


class RoundScheduler:
    """Resolves the table on a fixed interval, one pass at a time.

    Ticks run on the APScheduler worker thread. A tick that fires while the
    previous pass (reporting included) is still running is dropped: the job
    is registered with ``max_instances=1`` and ``run_round`` additionally
    guards itself with a non-blocking lock, so direct calls cannot overlap
    a scheduled pass either. Both kinds of drop count towards
    ``ticks_skipped``.
    """

    def __init__(
        self,
        registry: PlayerRegistry,
        reporter: Reporter,
        interval_seconds: float = 30.0,
        rng: random.Random | None = None,
    ):
        if interval_seconds <= 0:
            raise ValueError(f"Round interval must be positive, got {interval_seconds}")

        self.registry = registry
        self.reporter = reporter
        self.interval_seconds = interval_seconds
        self._rng = rng or random.Random()
        self._pass_lock = threading.Lock()
        self._skip_lock = threading.Lock()
        self._scheduler = BackgroundScheduler()
        self._scheduler.add_listener(self._on_max_instances, EVENT_JOB_MAX_INSTANCES)
        self.rounds_resolved = 0
        self.ticks_skipped = 0

    @property
    def running(self) -> bool:
        return self._scheduler.running

    def spin(self) -> int:
        """Draw a pocket uniformly from 0-36."""
        return self._rng.randint(0, MAX_NUMBER)

    def run_round(self) -> RoundReport | None:
        """Run one resolution pass. Returns None if a pass is already in flight."""
        if not self._pass_lock.acquire(blocking=False):
            self._skip_tick()
            return None

        try:
            round_number = self.rounds_resolved + 1
            winning_number = self.spin()

            with logfire.span(
                "table.resolve_round",
                round_number=round_number,
                winning_number=winning_number,
            ):
                report = resolve(self.registry, winning_number, round_number=round_number)
                self.rounds_resolved = round_number

                # Totals are already applied; a broken reporter only loses the display
                try:
                    self.reporter(report)
                except Exception as e:
                    logger.error(f"Round {round_number} reporting failed: {e}", exc_info=True)

            return report
        finally:
            self._pass_lock.release()

    def _skip_tick(self) -> None:
        with self._skip_lock:
            self.ticks_skipped += 1
        logger.warning("Previous round still in flight, skipping tick")

    def _on_max_instances(self, event: JobSubmissionEvent) -> None:
        # APScheduler refused the tick before run_round was called
        if event.job_id == JOB_ID:
            self._skip_tick()

    def start(self) -> None:
        """Register the round job and start ticking."""
        if not self.registry:
            raise EmptyRosterError()

        self._scheduler.add_job(
            self.run_round,
            IntervalTrigger(seconds=self.interval_seconds),
            id=JOB_ID,
            name="Table: Round Resolution",
            max_instances=1,
            coalesce=True,
            replace_existing=True,
        )
        logger.info(
            f"Registered job: Round Resolution (every {self.interval_seconds:g}s, "
            f"{len(self.registry)} players)"
        )

        self._scheduler.start()
        logger.info("✓ Scheduler started")

    def shutdown(self, wait: bool = True) -> None:
        """Stop ticking. With ``wait`` an in-flight pass finishes first."""
        if not self._scheduler.running:
            return

        self._scheduler.shutdown(wait=wait)
        logger.info(f"✓ Scheduler stopped cleanly after {self.rounds_resolved} rounds")

    def __enter__(self) -> RoundScheduler:
        self.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.shutdown(wait=True)
