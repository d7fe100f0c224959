class CheckInError(Exception):
    pass


class ConfigError(CheckInError):
    """Credential or proxy file is missing or empty."""


class KeyFormatError(CheckInError):
    """Private key can't be turned into a wallet."""


class ProxyFormatError(CheckInError):
    """Proxy URL is not scheme://[user:pass@]host:port."""


class RemoteCallError(CheckInError):
    """API answered with something other than code 200."""
