import functools
import re
import time

import requests
from eth_account import Account
from eth_account.messages import encode_defunct
from loguru import logger
from web3 import Web3

from core.exceptions import ConfigError, KeyFormatError, RemoteCallError
from core.models import AccountCredential, WalletIdentity
from data.config import AUTH_MESSAGE_TEMPLATE, MAX_RETRIES

BACKOFF_DELAYS = tuple(2 ** attempt for attempt in range(1, MAX_RETRIES + 1))

RETRYABLE_ERRORS = (RemoteCallError, requests.RequestException)


def load_from_file(file_path):
    try:
        with open(file_path, "r", encoding="utf-8") as file:
            return [line.strip() for line in file.read().splitlines() if line.strip()]
    except OSError as e:
        logger.error(f"Error reading file {file_path}: {e}")
        return []


def pair_accounts(key_list: list[str], proxy_list: list[str]) -> list[AccountCredential]:
    if not key_list:
        raise ConfigError("No private keys found. Please check pk.txt")

    if not proxy_list:
        raise ConfigError("No proxies found. Please check proxy.txt")

    if len(key_list) != len(proxy_list):
        logger.warning(
            f"Number of private keys ({len(key_list)}) doesn't match number of "
            f"proxies ({len(proxy_list)}). Using available pairs."
        )

    return [AccountCredential(key=key, proxy=proxy) for key, proxy in zip(key_list, proxy_list)]


def mask(value: str) -> str:
    if len(value) <= 10:
        return "****"
    return f"{value[:6]}...{value[-4:]}"


def mask_proxy(proxy_url):
    if not proxy_url or not isinstance(proxy_url, str):
        return "invalid-proxy"

    if "@" not in proxy_url:
        return proxy_url

    scheme, _, rest = proxy_url.rpartition("://")
    host_port = rest.rsplit("@", 1)[1]
    prefix = f"{scheme}://" if scheme else ""
    return f"{prefix}****:****@{host_port}"


def get_address_wallet(private_key: str) -> str:
    """Checksummed address of the wallet behind a hex private key."""
    if private_key.startswith("0x"):
        private_key = private_key[2:]

    if not re.match(r"^[0-9a-fA-F]{64}$", private_key):
        raise KeyFormatError("Invalid private key format")

    try:
        account = Account.from_key(private_key)
    except ValueError as e:
        raise KeyFormatError(f"Invalid private key: {e}") from e

    return Web3.to_checksum_address(account.address)


def build_auth_message(address: str) -> str:
    return AUTH_MESSAGE_TEMPLATE.format(address=address)


def generate_signature(private_key: str) -> WalletIdentity:
    address = get_address_wallet(private_key)
    message = encode_defunct(text=build_auth_message(address))
    signed = Account.sign_message(message, private_key=private_key)

    return WalletIdentity(address=address, signature=Web3.to_hex(signed.signature))


def retry(action):
    """
    Retries the wrapped method on network or API failures, sleeping
    BACKOFF_DELAYS between attempts. The instance must expose `identity`.
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper_retry(self, *args, **kwargs):
            for attempt, delay in enumerate(BACKOFF_DELAYS + (None,), start=1):
                try:
                    return func(self, *args, **kwargs)
                except RETRYABLE_ERRORS as e:
                    if delay is None:
                        raise

                    logger.error(f"{self.identity} | {action.capitalize()} error: {e}")
                    logger.info(
                        f"{self.identity} | Retrying {action} "
                        f"({attempt}/{MAX_RETRIES}) in {delay}s..."
                    )
                    time.sleep(delay)

        return wrapper_retry

    return decorator
