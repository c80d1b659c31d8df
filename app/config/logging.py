# app/config/logging.py

import json
import logging
from datetime import datetime, timezone

from app.core.context import correlation_id_ctx


class JsonFormatter(logging.Formatter):
    def format(self, record):
        log_record = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "correlation_id": correlation_id_ctx.get(),
        }
        if record.exc_info:
            log_record["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(log_record)


def configure_logging(log_level: str):
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    # Re-running (e.g. app reload) must not stack handlers.
    if any(isinstance(h.formatter, JsonFormatter) for h in root_logger.handlers):
        return

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    root_logger.addHandler(handler)
