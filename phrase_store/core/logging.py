"""Structured logging setup."""
import logging, sys, json

from phrase_store.config.settings import get_settings

_RESERVED = set(logging.LogRecord("", 0, "", 0, "", None, None).__dict__) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    def format(self, record):
        base = {
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
        }
        if record.exc_info:
            base["exc_info"] = self.formatException(record.exc_info)
        for k, v in record.__dict__.items():
            if k.startswith("_") or k in _RESERVED:
                continue
            base[k] = v if isinstance(v, (str, int, float, bool, type(None))) else str(v)
        return json.dumps(base)


def configure_logging(level: str | None = None, log_format: str | None = None) -> None:
    """Install a stdout handler on the root logger; defaults come from settings."""
    root = logging.getLogger()
    if root.handlers:
        return
    current = get_settings()
    root.setLevel(level or current.log_level.value)
    handler = logging.StreamHandler(sys.stdout)
    if (log_format or current.log_format) == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    root.addHandler(handler)
