import logging
import os

VERSION = '0.1.0'
USER_AGENT = f'httpeek/{VERSION}'
ACCEPT = '*/*'

SOURCE_STDIN = '-'

LOG_ENV = 'HTTPEEK_LOG'
LOG_FILE_ENV = 'HTTPEEK_LOG_FILE'
LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'


def setup_logging(environ=None):
    """Configure process-wide logging from the environment.

    ``HTTPEEK_LOG`` holds a level name; when it is unset or empty nothing
    is logged. ``HTTPEEK_LOG_FILE`` redirects the log to a file which is
    truncated on every run.
    """
    environ = os.environ if environ is None else environ
    level_name = environ.get(LOG_ENV, '').strip().upper()
    if not level_name:
        logging.disable(logging.CRITICAL)
        return
    logging.disable(logging.NOTSET)
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.INFO

    log_path = environ.get(LOG_FILE_ENV)
    if log_path:
        logging.basicConfig(filename=log_path, filemode='w',
                            level=level, format=LOG_FORMAT, force=True)
    else:
        logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
    logging.info(f'logging configured at {logging.getLevelName(level)}')
