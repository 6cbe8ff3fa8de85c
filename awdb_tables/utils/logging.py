import logging
from typing import Union

def setup_logging(level: Union[int, str] = logging.INFO):
    """Configure logging for the awdb_tables CLI"""
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module"""
    return logging.getLogger(name)
