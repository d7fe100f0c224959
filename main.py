from loguru import logger

from core.logger import setup_logging
from core.scheduler import run_forever, supervise

BANNER = (
    "\n<cyan>================================</cyan>\n"
    "<yellow>     CORESKY CHECK-IN BOT</yellow>\n"
    "<cyan>================================</cyan>\n\n"
)

if __name__ == '__main__':
    setup_logging()
    logger.opt(raw=True, colors=True).info(BANNER)
    logger.info("CoreSky check-in script initialized")

    supervise(run_forever)
