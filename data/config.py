PRIVATE_KEYS_PATH = "data/pk.txt"
PROXIES_PATH = "data/proxy.txt"

LOG_FILE = "coresky.log"

BASE_URL = "https://www.coresky.com"
LOGIN_ENDPOINT = "/api/user/login"
SIGN_ENDPOINT = "/api/taskwall/meme/sign"
SCORE_ENDPOINT = "/api/user/score/detail"

REF_CODE = "aeepcd"
PROJECT_ID = "0"

# Sent as-is, the backend rejects requests that don't look like Chrome
HEADERS = {
    "accept": "application/json, text/plain, */*",
    "accept-encoding": "gzip, deflate, br, zstd",
    "accept-language": "en-US,en;q=0.9",
    "content-type": "application/json",
    "hearder_gray_set": "0",
    "origin": "https://www.coresky.com",
    "referer": "https://www.coresky.com/tasks-rewards",
    "sec-ch-ua": '"Chromium";v="134", "Not:A-Brand";v="24", "Google Chrome";v="134"',
    "sec-ch-ua-mobile": "?0",
    "sec-ch-ua-platform": '"Windows"',
    "sec-fetch-dest": "empty",
    "sec-fetch-mode": "cors",
    "sec-fetch-site": "same-origin",
    "user-agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
                  "(KHTML, like Gecko) Chrome/134.0.0.0 Safari/537.36",
}

# Signed verbatim, do not reformat
AUTH_MESSAGE_TEMPLATE = (
    "Welcome to CoreSky!\n"
    "\n"
    "Click to sign in and accept the CoreSky Terms of Service.\n"
    "\n"
    "This request will not trigger a blockchain transaction or cost any gas fees.\n"
    "\n"
    "Your authentication status will reset after 24 hours.\n"
    "\n"
    "Wallet address:\n"
    "\n"
    "{address}"
)

REQUEST_TIMEOUT = 30
MAX_RETRIES = 3
DELAY_BETWEEN_ACCOUNT = 5
RUN_INTERVAL_HOURS = 24.5
SUPERVISOR_RESTART_DELAY = 60
