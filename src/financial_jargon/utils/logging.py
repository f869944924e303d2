from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

# LogRecord attributes that are not user-supplied extras
_RESERVED = frozenset(
    (
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
    )
)


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=UTC).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        for k, v in record.__dict__.items():
            if k not in _RESERVED:
                payload[k] = v
        return json.dumps(payload, ensure_ascii=False, default=str)


def get_logger(
    name: str, logs_root: Path, run_id: str | None = None, console_level: int = logging.INFO
) -> logging.Logger:
    """
    Create/get a logger that writes JSON lines to logs_root/YYYYMMDD/run_id.log
    and human-readable INFO to console.

    Configured once per (name, logs_root); asking for a different logs_root
    closes the old handlers and points the logger at the new root.
    """
    logger = logging.getLogger(name)
    root = Path(logs_root)
    if getattr(logger, "_jargon_logs_root", None) == root:
        return logger

    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    ch = logging.StreamHandler()
    ch.setLevel(console_level)
    ch.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.addHandler(ch)

    date_part = datetime.now().strftime("%Y%m%d")
    run_part = run_id or datetime.now().strftime("%H%M%S")
    log_dir = root / date_part
    log_dir.mkdir(parents=True, exist_ok=True)
    fh_path = log_dir / f"{run_part}.log"
    fh = logging.FileHandler(fh_path, encoding="utf-8")
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(JsonFormatter())
    logger.addHandler(fh)

    logger._jargon_logs_root = root  # type: ignore[attr-defined]
    logger.debug("logger_initialized", extra={"log_file": str(fh_path)})
    return logger
