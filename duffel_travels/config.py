import os
import sys
import json
import logging
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file in project root
_project_root = Path(__file__).resolve().parent.parent
load_dotenv(_project_root / ".env")

logger = logging.getLogger(__name__)


class Config:
    """Configuration management for the Duffel MCP server."""

    # Provider
    DUFFEL_API_KEY = os.getenv("DUFFEL_API_KEY")
    DUFFEL_API_BASE_URL = os.getenv("DUFFEL_API_BASE_URL", "https://api.duffel.com")
    DUFFEL_API_TIMEOUT = float(os.getenv("DUFFEL_API_TIMEOUT", "30"))

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def validate(cls):
        """Check for missing critical keys."""
        missing = []
        if not cls.DUFFEL_API_KEY:
            missing.append("DUFFEL_API_KEY")

        if missing:
            logger.warning(f"Missing keys: {', '.join(missing)}. Tool calls will report the missing configuration.")
            return False
        return True


def setup_logging(level="INFO"):
    """Configure structured JSON logging on stderr (stdout carries the MCP stream)."""
    handler = logging.StreamHandler(sys.stderr)

    class JsonFormatter(logging.Formatter):
        def format(self, record):
            log_record = {
                "timestamp": self.formatTime(record, self.datefmt),
                "level": record.levelname,
                "message": record.getMessage(),
                "module": record.module,
                "function": record.funcName,
            }
            if hasattr(record, "tool"):
                log_record["tool"] = record.tool
            if record.exc_info:
                log_record["exception"] = self.formatException(record.exc_info)
            return json.dumps(log_record)

    handler.setFormatter(JsonFormatter())

    root = logging.getLogger()
    root.setLevel(level)
    # Remove existing handlers to avoid duplication
    for h in list(root.handlers):
        root.removeHandler(h)
    root.addHandler(handler)
