import sys

from loguru import logger

from data.config import LOG_FILE

LEVEL_COLORS = {
    "CRITICAL": "red",
    "ERROR": "red",
    "WARNING": "yellow",
    "SUCCESS": "green",
}

KEYWORD_COLORS = (
    (("error", "failed", "Error"), "red"),
    (("successful", "success"), "green"),
    (("Processing", "Retrying"), "blue"),
    (("score", "Day"), "yellow"),
    (("Waiting", "scheduled"), "magenta"),
)


def pick_color(record):
    color = LEVEL_COLORS.get(record["level"].name)
    if color:
        return color

    message = record["message"]
    for keywords, color in KEYWORD_COLORS:
        if any(keyword in message for keyword in keywords):
            return color

    return "white"


def console_format(record):
    color = pick_color(record)
    return (
        "<light-black>[{time:YYYY-MM-DD HH:mm:ss}]</light-black> "
        f"<{color}>{{message}}</{color}>\n{{exception}}"
    )


def setup_logging(log_file=LOG_FILE):
    logger.remove()
    logger.add(sys.stdout, format=console_format, colorize=True)
    logger.add(
        log_file,
        format="[{time:YYYY-MM-DD HH:mm:ss}] {message}",
        colorize=False,
        encoding="utf-8",
        mode="a",
    )
