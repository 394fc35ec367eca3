"""Public API of the schema-compile logging system.

- setup_logging(): wire the package root logger once, return a logger
- get_logger(): the call every module uses
- flush_all_handlers(): drain the queue and flush handlers
- clear_logger_state(): reset everything between tests
"""

import atexit
import contextlib
import logging
import time
from pathlib import Path

from schema_compile.logger.config import load_log_settings
from schema_compile.logger.handlers import ROOT_LOGGER_NAME, setup_root_logger
from schema_compile.logger.state import get_state

_FLUSH_TIMEOUT_SECONDS = 5.0


def flush_all_handlers() -> None:
    """Wait for the log queue to drain, then flush every handler."""
    state = get_state()
    if state.queue_listener is None or state.log_queue is None:
        return

    # QueueListener doesn't use task_done(), so poll the queue
    start_time = time.time()
    while not state.log_queue.empty():
        if time.time() - start_time > _FLUSH_TIMEOUT_SECONDS:
            break
        time.sleep(0.01)

    # dequeued is not yet written
    time.sleep(0.1)

    for handler in state.queue_listener.handlers:
        with contextlib.suppress(OSError, ValueError):
            handler.flush()


def _cleanup_logging() -> None:
    """Stop the QueueListener on interpreter exit."""
    state = get_state()
    if state.queue_listener is not None:
        state.queue_listener.stop()
        state.queue_listener = None


atexit.register(_cleanup_logging)


def setup_logging(
    name: str = ROOT_LOGGER_NAME,
    console_level: str | None = None,
    file_level: str | None = None,
    log_file: Path | None = None,
) -> logging.Logger:
    """Configure logging and return the named logger.

    The package root logger is initialized exactly once; later calls only
    return loggers. Child loggers ("schema_compile.loader", ...) propagate
    to the root, which owns the only handler.

    Args:
        name: Logger name, typically __name__
        console_level: Console log level, default from the environment
        file_level: File log level, default from the environment
        log_file: Log file path, default from the environment (None disables)

    Returns:
        Logger instance

    Raises:
        ConfigurationError: If file logging setup fails

    """
    state = get_state()
    with state.lock:
        if not state.root_initialized:
            cfg_console, cfg_file, cfg_path = load_log_settings()
            setup_root_logger(
                state,
                console_level or cfg_console,
                file_level or cfg_file,
                log_file or cfg_path,
            )

    return logging.getLogger(name)


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Get a logger, initializing the logging system on first use.

    Example:
        >>> from schema_compile.logger import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("Registered %s", identifier)

    """
    return setup_logging(name=name)


def clear_logger_state() -> None:
    """Reset logging for test isolation.

    Stops the QueueListener, closes handlers on schema_compile loggers and
    forgets them so the next get_logger() call starts fresh. Not for use in
    production code.
    """
    state = get_state()
    with state.lock:
        if state.queue_listener is not None:
            flush_all_handlers()
            state.queue_listener.stop()
            for handler in state.queue_listener.handlers:
                handler.close()
            state.queue_listener = None

        state.log_queue = None
        state.root_initialized = False

        for logger_name in list(logging.Logger.manager.loggerDict.keys()):
            if not logger_name.startswith(ROOT_LOGGER_NAME):
                continue
            log_instance = logging.getLogger(logger_name)
            for handler in log_instance.handlers[:]:
                handler.close()
                log_instance.removeHandler(handler)
            logging.Logger.manager.loggerDict.pop(logger_name, None)
