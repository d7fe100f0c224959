import json

import requests
from loguru import logger

from core.client import create_session
from core.exceptions import CheckInError, KeyFormatError, RemoteCallError
from core.models import CheckInResult, Session
from core.utils import generate_signature, get_address_wallet, mask, mask_proxy, retry
from data.config import LOGIN_ENDPOINT, PROJECT_ID, REF_CODE, SCORE_ENDPOINT, SIGN_ENDPOINT


class CheckIn:
    def __init__(self, key, proxy=None):
        self.key = key
        self.proxy = proxy
        self.address = None

    @property
    def identity(self):
        if self.address:
            return mask(self.address)
        return mask(self.key)

    def run(self) -> CheckInResult:
        try:
            session = self.login()
            is_signed_in, sign_day = self.daily_sign_in(session)
            score = self.check_score(session)

        except (CheckInError, requests.RequestException) as e:
            logger.error(f"{mask(self.key)} | Check-in process failed: {e}")
            return CheckInResult(
                success=False,
                address=self.address or self.recover_address(),
                error=str(e) or e.__class__.__name__,
            )

        return CheckInResult(
            success=True,
            address=session.address,
            is_signed_in=is_signed_in,
            sign_day=sign_day,
            score=score,
        )

    def recover_address(self):
        try:
            return get_address_wallet(self.key)
        except KeyFormatError as e:
            logger.error(f"{mask(self.key)} | Could not extract wallet address: {e}")
            return "unknown"

    @retry("login")
    def login(self) -> Session:
        wallet = generate_signature(self.key)
        self.address = wallet.address
        logger.info(f"{self.identity} | Processing wallet via {mask_proxy(self.proxy)}")

        client = create_session(self.proxy)
        payload = {
            "address": wallet.address,
            "signature": wallet.signature,
            "refCode": REF_CODE,
            "projectId": PROJECT_ID,
        }
        data = self.send_request(client, LOGIN_ENDPOINT, payload, failure="Login failed")

        token = data.get("token")
        if not token:
            raise RemoteCallError("Login failed: no token in response")

        client.headers["token"] = token
        logger.success(f"{self.identity} | Login successful")
        return Session(client=client, token=token, address=wallet.address)

    @retry("sign-in")
    def daily_sign_in(self, session: Session):
        data = self.send_request(session.client, SIGN_ENDPOINT, failure="Sign-in failed")
        if "isSign" not in data or "signDay" not in data:
            raise RemoteCallError("Sign-in failed: no sign-in status in response")

        is_signed_in = data["isSign"] == 1
        sign_day = data["signDay"]
        logger.info(
            f"{self.identity} | Daily sign-in {'successful' if is_signed_in else 'failed'} "
            f"(Day {sign_day})"
        )

        return is_signed_in, sign_day

    @retry("score check")
    def check_score(self, session: Session):
        payload = {
            "page": 1,
            "limit": 10,
            "address": session.address.lower(),
        }
        data = self.send_request(session.client, SCORE_ENDPOINT, payload, failure="Score check failed")

        if "score" not in data:
            raise RemoteCallError("Score check failed: no score in response")

        score = data["score"]
        logger.info(f"{self.identity} | Current score: {score}")

        return score

    @staticmethod
    def send_request(client, endpoint, payload=None, failure="Request failed"):
        body = None if payload is None else json.dumps(payload, separators=(",", ":"))
        response = client.post(endpoint, data=body)
        response.raise_for_status()

        try:
            data = response.json()
        except ValueError as e:
            raise RemoteCallError(f"{failure}: invalid JSON in response") from e

        if not isinstance(data, dict) or data.get("code") != 200:
            message = data.get("message") if isinstance(data, dict) else data
            raise RemoteCallError(f"{failure}: {message}")

        debug = data.get("debug")
        if not isinstance(debug, dict):
            raise RemoteCallError(f"{failure}: malformed response body")

        return debug
