from dataclasses import dataclass, field
from typing import Optional

import requests


@dataclass(frozen=True)
class AccountCredential:
    key: str
    proxy: str


@dataclass(frozen=True)
class WalletIdentity:
    address: str
    signature: str


@dataclass
class Session:
    client: requests.Session
    token: str
    address: str


@dataclass
class CheckInResult:
    success: bool
    address: str = "unknown"
    is_signed_in: Optional[bool] = None
    sign_day: Optional[int] = None
    score: Optional[int] = None
    error: Optional[str] = field(default=None)
