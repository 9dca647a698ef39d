from __future__ import annotations

import logging
from collections import deque
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Final, Optional, Union

from rich.console import Console
from rich.logging import RichHandler

from binsize.resources import log_root

if TYPE_CHECKING:
    from binsize.util.config import Config

console: Final[Console] = Console()

time_format: Final[str] = "%Y-%m-%d %H:%M:%S"
log_format: Final[str] = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

log: Final[logging.Logger] = logging.getLogger("binsize")
log.addHandler(logging.NullHandler())


class BinSizeFileHandler(logging.Handler):
    def __init__(self, file_name: Union[str, Path], max_pending: int = 1000):
        super().__init__()
        self._file_name = Path(file_name)
        self._log_hold: deque[logging.LogRecord] = deque(maxlen=max_pending)  # oldest dropped when full

    def _write_log_entry(self, log_entry):
        with open(self._file_name, "a", encoding="utf-8") as f:
            f.write(log_entry + "\n")

    def emit(self, record: logging.LogRecord):
        self.acquire()
        try:
            while self._log_hold:
                try:
                    self._write_log_entry(self.format(self._log_hold[0]))
                except OSError:
                    break
                self._log_hold.popleft()

            # Still failing: queue behind the backlog to keep order
            if self._log_hold:
                self._log_hold.append(record)
                return

            try:
                self._write_log_entry(self.format(record))
            except OSError:
                self._log_hold.append(record)
        finally:
            self.release()

    @property
    def pending(self) -> int:
        """Number of records waiting to be retried."""
        return len(self._log_hold)


def get_time() -> str:
    return datetime.now().strftime("%Y-%m-%d_%H-%M-%S")


def configure_logging(config: Config, directory: Optional[Path] = None) -> logging.Logger:
    """Attach handlers to the ``binsize`` logger according to ``config``.

    Any handlers installed by a previous call are replaced, so calling this
    twice does not duplicate output.

    Args:
        config: Loaded configuration, see :func:`binsize.util.config.load_config`.
        directory: Where log files go when file logging is enabled.
            Defaults to ``log/`` under the working directory.

    Returns:
        logging.Logger: The configured ``binsize`` logger.
    """
    settings = config["logging"]
    level = logging.getLevelName(settings["level"])
    debug_mode = level == logging.DEBUG

    for handler in list(log.handlers):
        log.removeHandler(handler)
        handler.close()

    rich_handler = RichHandler(
        rich_tracebacks=settings["rich_tracebacks"],
        show_path=True,
        enable_link_path=True,
        tracebacks_show_locals=debug_mode,
        show_level=False,
        console=console,
    )
    log.addHandler(rich_handler)

    if settings["file"]:
        log_dir = Path(directory) if directory is not None else log_root
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = BinSizeFileHandler(log_dir / f"binsize_{get_time()}.log")
        file_handler.setFormatter(logging.Formatter(log_format, datefmt=time_format))
        log.addHandler(file_handler)

    log.setLevel(level)
    return log
