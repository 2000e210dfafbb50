import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./transfer_booking.db")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# SMTP transport - all four of host/port/user/password are required for email
SMTP_HOST = os.getenv("SMTP_HOST")
SMTP_PORT = os.getenv("SMTP_PORT")
SMTP_USER = os.getenv("SMTP_USER")
SMTP_PASSWORD = os.getenv("SMTP_PASSWORD")
# "true" means implicit TLS (usually port 465); otherwise STARTTLS when offered
SMTP_SECURE = os.getenv("SMTP_SECURE", "false").lower() == "true"
SMTP_FROM = os.getenv("SMTP_FROM") or SMTP_USER
SMTP_TIMEOUT = float(os.getenv("SMTP_TIMEOUT", "30"))
EMAIL_FROM_NAME = os.getenv("EMAIL_FROM_NAME", "Royal Transfer")

# Where new submissions are announced
CONTACT_FORM_EMAIL = os.getenv("CONTACT_FORM_EMAIL")
TRANSFER_REQUEST_EMAIL = os.getenv("TRANSFER_REQUEST_EMAIL")

ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*").split(",")
