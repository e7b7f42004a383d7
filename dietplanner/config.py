import logging
import os

from dotenv import load_dotenv

load_dotenv()

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class Config:
    APP_NAME = os.getenv("APP_NAME", "Daily Diet")
    SECRET_KEY = os.getenv("FLASK_SECRET_KEY")
    # Site allowed to frame the app via CSP, e.g. "https://app.gohighlevel.com"
    ALLOWED_EMBED_DOMAIN = os.getenv("ALLOWED_EMBED_DOMAIN") or None
    RESULT_CACHE_SIZE = int(os.getenv("RESULT_CACHE_SIZE", "500"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


def configure_logging(level: str = Config.LOG_LEVEL) -> None:
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(level.upper())
        return
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
