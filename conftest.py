import logging
from whiteboard.config import configure_logging


def pytest_configure(config):
    """
    Route the package's loggers to the console at debug level so failing
    tests show the editor's trace. This hook is called early in the
    pytest process.
    """
    configure_logging(logging.DEBUG)
