from typing import Optional
from urllib.parse import urljoin, urlsplit

import requests
from loguru import logger

from core.exceptions import ProxyFormatError
from core.utils import mask_proxy
from data.config import BASE_URL, HEADERS, REQUEST_TIMEOUT

PROXY_SCHEMES = ("http", "https", "socks4", "socks5", "socks5h")


class CoreSkySession(requests.Session):
    """requests.Session bound to the CoreSky base URL with a default timeout."""

    def __init__(self, base_url=BASE_URL, timeout=REQUEST_TIMEOUT):
        super().__init__()
        self.base_url = base_url
        self.timeout = timeout
        self.headers.clear()
        self.headers.update(HEADERS)

    def request(self, method, url, *args, **kwargs):
        kwargs.setdefault("timeout", self.timeout)
        return super().request(method, urljoin(self.base_url, url), *args, **kwargs)


def parse_proxy(proxy_url: str) -> str:
    if "://" not in proxy_url:
        proxy_url = f"http://{proxy_url}"

    parts = urlsplit(proxy_url)
    try:
        port = parts.port
    except ValueError as e:
        raise ProxyFormatError(f"Invalid proxy port: {e}") from e

    if parts.scheme not in PROXY_SCHEMES:
        raise ProxyFormatError(f"Unsupported proxy scheme: {parts.scheme!r}")

    if not parts.hostname or port is None:
        raise ProxyFormatError("Proxy must look like scheme://[user:pass@]host:port")

    return proxy_url


def create_session(proxy: Optional[str] = None) -> CoreSkySession:
    session = CoreSkySession()

    if proxy:
        try:
            proxy_url = parse_proxy(proxy)
        except ProxyFormatError as e:
            logger.error(f"Invalid proxy format: {mask_proxy(proxy)}. Error: {e}")
        else:
            session.proxies = {
                "http": proxy_url,
                "https": proxy_url,
            }

    return session
