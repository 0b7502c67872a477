"""Application configuration and constants."""
import os
import sys
from pathlib import Path


def _resource_path(relative: str) -> Path:
    """Get path to resource, works for PyInstaller bundles."""
    if getattr(sys, "frozen", False):
        base_dir = Path(sys._MEIPASS)
    else:
        base_dir = Path(__file__).resolve().parent.parent
    return base_dir / relative


def _parse_int_env(name: str, default: int) -> int:
    """Parse integer from environment variable."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _parse_bool_env(name: str, default: bool) -> bool:
    """Parse boolean flag from environment variable."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


STATIC_DIR = _resource_path("static")

# Quizzes
_quiz_bank = os.environ.get("QUIZ_BANK_PATH")
QUIZ_BANK_PATH = Path(_quiz_bank) if _quiz_bank else None
ATTEMPT_TTL_MINUTES = _parse_int_env("ATTEMPT_TTL_MINUTES", 120)

# Content service (headless CMS)
CMS_PROJECT_ID = os.environ.get("CMS_PROJECT_ID", "r6ujmq65")
CMS_DATASET = os.environ.get("CMS_DATASET", "production")
CMS_API_VERSION = os.environ.get("CMS_API_VERSION", "2024-01-01")
CMS_USE_CDN = _parse_bool_env("CMS_USE_CDN", True)
CMS_TIMEOUT_SECONDS = _parse_int_env("CMS_TIMEOUT_SECONDS", 15)
POSTS_PAGE_SIZE = _parse_int_env("POSTS_PAGE_SIZE", 10)

# Email notifications
EMAIL_API_URL = os.environ.get(
    "EMAIL_API_URL", "https://api.emailjs.com/api/v1.0/email/send"
)
EMAIL_SERVICE_ID = os.environ.get("EMAIL_SERVICE_ID", "")
EMAIL_TEMPLATE_ID = os.environ.get("EMAIL_TEMPLATE_ID", "")
EMAIL_PUBLIC_KEY = os.environ.get("EMAIL_PUBLIC_KEY", "")
EMAIL_TIMEOUT_SECONDS = _parse_int_env("EMAIL_TIMEOUT_SECONDS", 30)

# Payments
PAYMENT_LINK_URL = os.environ.get(
    "PAYMENT_LINK_URL", "https://pages.razorpay.com/pl_RskjfyGw1AvjLM/view"
)
CHECKOUT_KEY_ID = os.environ.get("CHECKOUT_KEY_ID", "")
CHECKOUT_CURRENCY = "INR"
CHECKOUT_MERCHANT_NAME = "ISKCON Jabalpur"
CHECKOUT_IMAGE = "/Iskcon.svg"
CHECKOUT_THEME_COLOR = "#d4af37"

# Festival
FEST_NAME = "ARAMBH – Hare Krishna Fest 2026"
FEST_DATE = "Sunday, 4th January 2026"
FEST_TIME = "12:00 PM – 5:00 PM"
FEST_VENUE = "ISKCON Jabalpur, Chowkital, Lamhetaghat, Jabalpur (M.P.)"
FEST_TICKET_PRICE = _parse_int_env("FEST_TICKET_PRICE", 99)  # rupees
