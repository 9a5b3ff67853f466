import json
import logging
import re
from datetime import datetime, timezone

from extension_healthcheck.settings import get_settings

ROOT_LOGGER_NAME = "extension_healthcheck"


class JSONFormatter(logging.Formatter):
    def _sanitize_sensitive_data(self, data: str) -> str:
        """Remove or mask sensitive information from log data."""
        patterns = [
            # API keys and tokens
            (r'(["\']?(?:api[_-]?)?(?:key|token|secret|password|passwd|pwd)["\']?\s*[:=]\s*["\']?)([^"\']+)(["\']?)',
             r'\1***API_KEY_OR_TOKEN_REDACTED***\3'),
            # Bearer tokens (kube-apiserver service account tokens)
            (r'(Bearer\s+)([A-Za-z0-9\-_.]+)', r'\1***BEARER_TOKEN_REDACTED***'),
            # JWT tokens
            (r'(eyJ[A-Za-z0-9\-_]+\.eyJ[A-Za-z0-9\-_]+\.[A-Za-z0-9\-_]+)', r'***JWT_REDACTED***'),
            # Generic URLs with credentials
            (r'(https?://[^:/\s]+:)([^@\s]+)(@)', r'\1***URL_CREDS_REDACTED***\3'),
        ]

        for pattern, replacement in patterns:
            data = re.sub(pattern, replacement, data, flags=re.IGNORECASE)

        return data

    def format(self, record: logging.LogRecord) -> str:
        message = self._sanitize_sensitive_data(record.getMessage())

        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": message,
        }

        if record.exc_info:
            exc_text = self.formatException(record.exc_info)
            log_data['exc_info'] = self._sanitize_sensitive_data(exc_text)

        if record.stack_info:
            stack_text = self.formatStack(record.stack_info)
            log_data['stack_info'] = self._sanitize_sensitive_data(stack_text)

        return json.dumps(log_data, ensure_ascii=False)


def setup_logger(log_level: str | None = None) -> logging.Logger:
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(JSONFormatter())
    logger.addHandler(console_handler)

    log_level_name = (log_level or get_settings().LOG_LEVEL).upper()
    logger.setLevel(getattr(logging, log_level_name, logging.INFO))

    return logger


def get_named_logger(name: str) -> logging.Logger:
    """Child of the package logger, sharing its handler and level."""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


logger = setup_logger()
