import os

from dotenv import load_dotenv

load_dotenv()


class Settings:
    log_level: str = os.getenv("IMS_LOG_LEVEL", "WARNING").upper()
    # Empty means console only.
    log_file: str = os.getenv("IMS_LOG_FILE", "")

    report_date_format: str = os.getenv("IMS_REPORT_DATE_FORMAT", "%Y-%m-%d %H:%M UTC")
    currency: str = os.getenv("IMS_CURRENCY", "USD")


settings = Settings()
