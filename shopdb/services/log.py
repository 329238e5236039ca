import datetime, json, logging, os, sys
from datetime import timezone
from logging.handlers import TimedRotatingFileHandler

from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_DIR = os.getenv("LOG_DIR")


# ---------- JSON logger to stdout ----------
class JsonFormatter(logging.Formatter):
    def format(self, record):
        ts = datetime.datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat()
        base = {
            "timestamp": ts,
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "line": record.lineno,
            "process": record.process,
            "thread": record.thread
        }
        if record.exc_info:
            base["exc_info"] = self.formatException(record.exc_info)
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            base.update(extra)
        return json.dumps(base, default=str, ensure_ascii=False)


def get_logger(name):
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(JsonFormatter())
    logger.addHandler(stream_handler)

    if LOG_DIR:
        os.makedirs(LOG_DIR, exist_ok=True)
        file_handler = TimedRotatingFileHandler(
            os.path.join(LOG_DIR, f"{name}.log"),
            when="midnight",   # rotate at midnight
            interval=1,
            backupCount=7      # keep 7 days
        )
        file_handler.setFormatter(JsonFormatter())
        logger.addHandler(file_handler)

    logger.setLevel(LOG_LEVEL)
    logger.propagate = False
    return logger
