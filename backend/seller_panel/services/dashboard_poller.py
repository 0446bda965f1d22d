"""
Dashboard Poller

Keeps a seller dashboard fresh by refetching on a timer: orders every 30
seconds and the dashboard summary every 60 seconds. Each refresh job runs
as its own asyncio task; a failing fetch is logged (and optionally retried
once after a fixed delay) and the job keeps polling.

Jobs are independent: refreshes are not de-duplicated and may complete in
any order.

Author: Amzify Team
Date: 2025-11-11
"""
import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Optional

from seller_panel.core.config import settings

logger = logging.getLogger(__name__)

Fetch = Callable[[], Awaitable[Any]]
ResultHandler = Callable[[Any], None]
ErrorHandler = Callable[[str, Exception], None]


@dataclass
class RefreshJob:
    """
    A periodic fetch.

    Fields:
        name: Job name used in logs and error callbacks
        fetch: Coroutine function producing fresh data
        interval: Seconds between refreshes
        on_result: Called with each successful result
        retries: Extra attempts after a failure
        retry_delay: Seconds to wait before a retry
    """
    name: str
    fetch: Fetch
    interval: float
    on_result: Optional[ResultHandler] = None
    retries: int = 0
    retry_delay: float = 0.0


class DashboardPoller:

    def __init__(
        self,
        on_error: Optional[ErrorHandler] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep
    ):
        self.jobs: List[RefreshJob] = []
        self.on_error = on_error
        self._sleep = sleep
        self._tasks: Dict[str, asyncio.Task] = {}

    def add_job(self, job: RefreshJob) -> None:
        self.jobs.append(job)

    @property
    def running(self) -> bool:
        return any(not task.done() for task in self._tasks.values())

    async def refresh(self, job: RefreshJob) -> Optional[Any]:
        """Run one refresh of a job; returns the result, or None after a final failure"""
        attempt = 0
        while True:
            try:
                result = await job.fetch()
            except asyncio.CancelledError:
                raise
            except Exception as e:
                if attempt < job.retries:
                    attempt += 1
                    logger.warning(
                        f"{job.name} refresh failed ({e}), retrying in {job.retry_delay}s "
                        f"(attempt {attempt}/{job.retries})"
                    )
                    await self._sleep(job.retry_delay)
                    continue

                logger.error(f"{job.name} refresh failed: {e}")
                if self.on_error:
                    self.on_error(job.name, e)
                return None

            if job.on_result:
                job.on_result(result)
            return result

    async def _run(self, job: RefreshJob) -> None:
        logger.info(f"Polling {job.name} every {job.interval}s")
        while True:
            await self.refresh(job)
            await self._sleep(job.interval)

    def start(self) -> None:
        """Start one task per job; must be called from a running event loop"""
        for job in self.jobs:
            task = self._tasks.get(job.name)
            if task is None or task.done():
                self._tasks[job.name] = asyncio.create_task(self._run(job), name=f"poll-{job.name}")

    async def stop(self) -> None:
        tasks = list(self._tasks.values())
        for task in tasks:
            task.cancel()
        for task in tasks:
            try:
                await task
            except asyncio.CancelledError:
                pass
        self._tasks.clear()
        logger.info("Polling stopped")


def seller_dashboard_poller(
    client,
    on_orders: Optional[ResultHandler] = None,
    on_dashboard: Optional[ResultHandler] = None,
    on_error: Optional[ErrorHandler] = None,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep
) -> DashboardPoller:
    """
    Poller wired to a SellerApiClient with the standard intervals.

    The dashboard job retries once after DASHBOARD_RETRY_DELAY_SECONDS.
    """
    poller = DashboardPoller(on_error=on_error, sleep=sleep)
    poller.add_job(RefreshJob(
        name="orders",
        fetch=client.get_my_orders,
        interval=settings.ORDERS_POLL_SECONDS,
        on_result=on_orders,
    ))
    poller.add_job(RefreshJob(
        name="dashboard",
        fetch=client.get_dashboard,
        interval=settings.DASHBOARD_POLL_SECONDS,
        on_result=on_dashboard,
        retries=1,
        retry_delay=settings.DASHBOARD_RETRY_DELAY_SECONDS,
    ))
    return poller
