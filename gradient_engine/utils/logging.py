"""
Logging utility module for the gradient engine.
"""

import logging
import os
import sys
from typing import Optional

# Define logging levels dictionary for easy reference
LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL
}

class LogFormatter(logging.Formatter):
    """Custom log formatter with colored output for console."""
    
    # ANSI color codes
    COLORS = {
        'RESET': '\033[0m',
        'RED': '\033[31m',
        'GREEN': '\033[32m',
        'YELLOW': '\033[33m',
        'BLUE': '\033[34m',
        'BOLD': '\033[1m'
    }
    
    # Level-specific colors
    LEVEL_COLORS = {
        'DEBUG': COLORS['BLUE'],
        'INFO': COLORS['GREEN'],
        'WARNING': COLORS['YELLOW'],
        'ERROR': COLORS['RED'],
        'CRITICAL': COLORS['RED'] + COLORS['BOLD']
    }
    
    def __init__(self, colored: bool = True, *args, **kwargs):
        """
        Initialize formatter.
        
        Args:
            colored: Whether to use colored output
            *args: Additional formatter args
            **kwargs: Additional formatter kwargs
        """
        self.colored = colored and sys.platform != 'win32'  # Disable colors on Windows
        super().__init__(*args, **kwargs)
    
    def format(self, record: logging.LogRecord) -> str:
        formatted_msg = super().format(record)
        
        if self.colored:
            level_name = record.levelname
            if level_name in self.LEVEL_COLORS:
                colored_level = f"{self.LEVEL_COLORS[level_name]}{level_name}{self.COLORS['RESET']}"
                formatted_msg = formatted_msg.replace(level_name, colored_level, 1)
        
        return formatted_msg


def setup_logging(log_file: Optional[str] = None, 
                  console_level: str = "INFO", 
                  file_level: str = "DEBUG",
                  component: Optional[str] = None,
                  colored: bool = True) -> logging.Logger:
    """
    Set up logging for the gradient engine.
    
    Args:
        log_file: Path to log file (None for no file logging)
        console_level: Console logging level
        file_level: File logging level
        component: Optional component name for the logger
        colored: Whether console output uses ANSI colors
        
    Returns:
        logging.Logger: Configured logger
    """
    logger_name = "gradient_engine"
    if component:
        logger_name = f"{logger_name}.{component}"
    
    logger = logging.getLogger(logger_name)
    
    # If handlers already exist, assume logger is already configured
    if logger.handlers:
        return logger
    
    # Set logger level to lowest of console and file to ensure messages are passed
    console_log_level = LOG_LEVELS.get(console_level.upper(), logging.INFO)
    file_log_level = LOG_LEVELS.get(file_level.upper(), logging.DEBUG)
    logger.setLevel(min(console_log_level, file_log_level) if log_file else console_log_level)
    
    # Console output goes to stderr so stdout stays machine readable
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_log_level)
    console_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    console_handler.setFormatter(LogFormatter(colored=colored, fmt=console_format, datefmt='%H:%M:%S'))
    logger.addHandler(console_handler)
    
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(file_log_level)
        
        # More detailed than console
        file_format = ("%(asctime)s [%(levelname)s] %(name)s "
                       "(%(filename)s:%(lineno)d): %(message)s")
        file_handler.setFormatter(logging.Formatter(file_format, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(file_handler)
    
    return logger


def log_exception(logger: logging.Logger, exception: Exception, 
                  message: str = "An exception occurred",
                  traceback: bool = True) -> None:
    """
    Log an exception.
    
    Args:
        logger: Logger to use
        exception: Exception to log
        message: Message to log with the exception
        traceback: Whether to include the traceback
    """
    exc_info = (type(exception), exception, exception.__traceback__) if traceback else None
    logger.error(f"{message}: {exception}", exc_info=exc_info)
