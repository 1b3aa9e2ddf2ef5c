import logging
import sys


FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'
DATEFMT = '%H:%M:%S'


def setup_logging(level=logging.WARNING, log_file=None):
    '''
    Route the basecalc loggers to stderr, and to log_file if given.

    Calling again replaces the handlers of the previous call.
    '''
    logger = logging.getLogger('basecalc')
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # stdout is for results.
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))
    formatter = logging.Formatter(FORMAT, datefmt=DATEFMT)
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger
