"""
Logging Configuration Module

This module provides thread-safe logging configuration for the analytics service,
including setup for queue-based logging and silencing of noisy third-party libraries.
"""

import logging
import logging.handlers
import sys
from queue import Queue
from typing import Optional


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"

NOISY_LOGGERS = [
    "werkzeug",
    "urllib3",
    "asyncio",
]


class ThreadSafeLoggingConfig:
    """Thread-safe logging configuration with queue-based logging."""
    
    def __init__(self):
        self._log_listener: Optional[logging.handlers.QueueListener] = None
        self._log_queue: Optional[Queue] = None
    
    @property
    def is_running(self) -> bool:
        """Whether the queue listener is active."""
        return self._log_listener is not None
    
    def setup_logging(self, debug: bool = False) -> None:
        """
        Configure thread-safe logging for the service and silence chatty libraries.
        
        Flask serves requests on several threads; every thread writes to a queue
        and a single listener thread writes the queue to stdout, so log lines
        never interleave.
        
        Args:
            debug: Whether to enable debug logging
        """
        if self.is_running:
            self.stop()
        
        self._log_queue = Queue()
        queue_handler = logging.handlers.QueueHandler(self._log_queue)
        
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        
        self._log_listener = logging.handlers.QueueListener(
            self._log_queue, console_handler, respect_handler_level=True
        )
        self._log_listener.start()
        
        root_logger = logging.getLogger()
        root_logger.handlers.clear()
        root_logger.addHandler(queue_handler)
        root_logger.setLevel(logging.DEBUG if debug else logging.INFO)
        
        if not debug:
            self._silence_noisy_libraries()
    
    def _silence_noisy_libraries(self) -> None:
        """Silence noisy third-party libraries."""
        for name in NOISY_LOGGERS:
            logger = logging.getLogger(name)
            logger.setLevel(logging.WARNING)
    
    def stop(self) -> None:
        """Stop the logging listener and cleanup."""
        if self._log_listener:
            self._log_listener.stop()
            self._log_listener = None
        if self._log_queue:
            self._log_queue = None


# Global logging configuration instance
logging_config = ThreadSafeLoggingConfig()


def setup_logging(debug: bool = False) -> None:
    """
    Setup thread-safe logging configuration.
    
    Args:
        debug: Whether to enable debug logging
    """
    logging_config.setup_logging(debug)


def stop_logging() -> None:
    """Stop the logging listener and cleanup."""
    logging_config.stop()

