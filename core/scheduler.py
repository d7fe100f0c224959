import time
from datetime import datetime, timedelta

from loguru import logger

from core.runner import run_batch
from data.config import RUN_INTERVAL_HOURS, SUPERVISOR_RESTART_DELAY


def run_once() -> datetime:
    """
    Runs one batch and returns the time the next one is due. A failing
    batch is logged and never stops the schedule.
    """
    try:
        run_batch()
    except Exception as e:
        logger.error(f"Schedule error: {e}")

    next_run = datetime.now() + timedelta(hours=RUN_INTERVAL_HOURS)
    logger.info(
        f"Next run scheduled in {RUN_INTERVAL_HOURS} hours "
        f"({next_run:%Y-%m-%d %H:%M:%S})"
    )
    return next_run


def run_forever():
    while True:
        run_once()
        time.sleep(RUN_INTERVAL_HOURS * 60 * 60)


def supervise(target, restart_delay=SUPERVISOR_RESTART_DELAY):
    while True:
        with logger.catch(message="Uncaught exception in scheduler"):
            target()

        logger.warning(f"Scheduler stopped, restarting in {restart_delay} seconds")
        time.sleep(restart_delay)
