import time

from loguru import logger

from core.checkin import CheckIn
from core.exceptions import ConfigError
from core.models import CheckInResult
from core.utils import load_from_file, mask, pair_accounts
from data.config import DELAY_BETWEEN_ACCOUNT, PRIVATE_KEYS_PATH, PROXIES_PATH


def run_batch(keys_path=PRIVATE_KEYS_PATH, proxies_path=PROXIES_PATH) -> list[CheckInResult]:
    logger.info("Starting CoreSky daily check-in process")

    key_list = load_from_file(keys_path)
    proxy_list = load_from_file(proxies_path)

    try:
        accounts = pair_accounts(key_list, proxy_list)
    except ConfigError as e:
        logger.error(str(e))
        return []

    results = []
    total = len(accounts)

    for index, account in enumerate(accounts, start=1):
        logger.info(f"Processing account {index}/{total}")

        try:
            result = CheckIn(key=account.key, proxy=account.proxy).run()
        except Exception as e:
            logger.error(f"{mask(account.key)} | Unexpected error with account {index}/{total}: {e}")
            result = CheckInResult(success=False, error=str(e) or e.__class__.__name__)

        if result.success:
            logger.success(f"Check-in successful for account {index}/{total}")
        else:
            logger.error(f"Check-in failed for account {index}/{total}: {result.error}")

        results.append(result)

        if index < total:
            logger.info(f"Waiting {DELAY_BETWEEN_ACCOUNT} seconds before next account...")
            time.sleep(DELAY_BETWEEN_ACCOUNT)

    succeeded = sum(result.success for result in results)
    logger.info(
        f"CoreSky daily check-in process completed: "
        f"{succeeded} succeeded, {total - succeeded} failed"
    )
    return results
