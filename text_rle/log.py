import logging
import sys


def init_logger(name: str = "text_rle", debug: bool = False) -> logging.Logger:
    """
    Initialize a logger with configurable verbosity.

    Parameters
    ----------
    name : str
        Logger name
    debug : bool
        If True, set log level to DEBUG. Otherwise, set to INFO.

    Returns
    -------
    logging.Logger
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter("[%(levelname)s] %(asctime)s | %(message)s", "%H:%M:%S")
    )
    logger.addHandler(handler)
    return logger


def get_logger(name: str = "text_rle") -> logging.Logger:
    """Get an existing logger instance."""
    return logging.getLogger(name)
