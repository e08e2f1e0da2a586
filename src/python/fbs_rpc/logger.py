import datetime
import logging
import sys


class ConsoleFormatter(logging.Formatter):
    """`[12:00:01.234] [INFO ] [parser] message`"""

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.datetime.fromtimestamp(record.created).strftime("%H:%M:%S.%f")[:-3]
        component = record.name.rsplit(".", 1)[-1]
        msg = record.getMessage()
        if record.exc_info:
            msg = f"{msg}\n{self.formatException(record.exc_info)}"
        return f"[{ts}] [{record.levelname:5}] [{component}] {msg}"


def setup_logging(verbose: bool = False, stream=None) -> logging.Logger:
    """Attach a console handler to the `fbs_rpc` logger tree (idempotent)."""
    root = logging.getLogger("fbs_rpc")
    root.setLevel(logging.DEBUG if verbose else logging.INFO)
    for handler in root.handlers:
        if getattr(handler, "_fbs_rpc_console", False):
            handler.setStream(stream or sys.stderr)
            return root
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(ConsoleFormatter())
    handler._fbs_rpc_console = True
    root.addHandler(handler)
    return root
