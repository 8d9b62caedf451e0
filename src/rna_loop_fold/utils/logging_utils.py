import logging
import sys
import time
from pathlib import Path
from typing import Optional
from datetime import datetime

# Default log directory
DEFAULT_LOG_DIR = Path("var/log")


def get_log_file_path(
        module_name: str,
        log_dir: Optional[Path] = None,
        include_timestamp: bool = True
) -> Path:
    """
    Build the path of a log file for a logger name.

    Dots in `module_name` become underscores and a timestamp is appended
    unless disabled. The log directory is created if needed.

    Parameters
    ----------
    module_name : str
        The name of the logger (e.g., "rna_loop_fold.scripts.predict_rna").
    log_dir : Optional[Path], optional
        Target directory. Defaults to `DEFAULT_LOG_DIR`.
    include_timestamp : bool, optional
        If True, add a timestamp so runs do not overwrite each other.

    Returns
    -------
    Path
        Full path of the log file.
    """
    if log_dir is None:
        log_dir = DEFAULT_LOG_DIR

    log_dir.mkdir(parents=True, exist_ok=True)

    safe_name = module_name.replace(".", "_")

    if include_timestamp:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filename = f"{safe_name}_{timestamp}.log"
    else:
        filename = f"{safe_name}.log"

    return log_dir / filename


def setup_logger(
    name: str,
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    log_dir: Optional[Path] = None,
    enable_file_logging: bool = True,
    console_level: Optional[int] = None,
    file_level: Optional[int] = None,
) -> logging.Logger:
    """
    Configure and return a logger with a console handler and an optional file handler.

    Existing handlers on the logger are removed first so repeated calls do not
    duplicate messages.

    Parameters
    ----------
    name : str
        The name of the logger, typically `__name__`.
    level : int, optional
        Base level for the logger and its handlers, by default `logging.INFO`.
    log_file : Optional[str], optional
        Explicit log file path. Overrides automatic path generation.
    log_dir : Optional[Path], optional
        Directory for the automatic log file. Defaults to `DEFAULT_LOG_DIR`.
    enable_file_logging : bool, optional
        If True and `log_file` is not given, write a timestamped log file.
    console_level : Optional[int], optional
        Override for the console handler level.
    file_level : Optional[int], optional
        Override for the file handler level.

    Returns
    -------
    logging.Logger
        The configured logger instance.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                                  datefmt='%Y-%m-%d %H:%M:%S')

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(console_level if console_level is not None else level)
    logger.addHandler(console_handler)

    file_handler = None
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, mode='a')
    elif enable_file_logging:
        log_path = get_log_file_path(name, log_dir=log_dir, include_timestamp=True)
        file_handler = logging.FileHandler(log_path, mode='a')
        logger.info(f"Logging to file: {log_path}")

    if file_handler:
        file_handler.setFormatter(formatter)
        file_handler.setLevel(file_level if file_level is not None else level)
        logger.addHandler(file_handler)

    return logger


def set_log_level(logger: logging.Logger, level: int) -> None:
    """
    Update the level of a logger and all of its handlers.

    Parameters
    ----------
    logger : logging.Logger
        The logger instance to update.
    level : int
        The new logging level (e.g., `logging.DEBUG`).
    """
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)


def cleanup_old_logs(log_dir: Optional[Path] = None, days_to_keep: int = 7) -> int:
    """
    Delete log files older than `days_to_keep` days.

    Parameters
    ----------
    log_dir : Optional[Path], optional
        The directory to clean. Defaults to `DEFAULT_LOG_DIR`.
    days_to_keep : int, optional
        Maximum age of kept files, in days. By default 7.

    Returns
    -------
    int
        Number of files removed.
    """
    if log_dir is None:
        log_dir = DEFAULT_LOG_DIR

    if not log_dir.exists():
        return 0

    cutoff_time = time.time() - (days_to_keep * 86400)
    removed = 0

    for log_file in log_dir.glob("*.log"):
        if log_file.stat().st_mtime < cutoff_time:
            log_file.unlink()
            logging.getLogger(__name__).info(f"Removed old log: {log_file}")
            removed += 1

    return removed
