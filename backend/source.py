import logging
import sys

from backend.errors import InvalidUrl, SourceReadFailure
from backend.validators import validate_url

COMMENT = '#'


def parse_urls(text, err=None):
    """Return the valid URLs of a batch listing in their original order.

    Blank lines and ``#`` comments are skipped. Lines that are not URLs
    are reported to ``err`` and dropped, the rest of the listing is still
    processed.
    """
    if err is None:
        err = sys.stderr
    urls = []
    for line in text.splitlines():
        url = line.strip()
        if not url or url.startswith(COMMENT):
            continue
        try:
            urls.append(validate_url(url))
        except InvalidUrl as e:
            logging.warning(f'skipping batch line: {e}')
            err.write(f'{e}\n')
    return urls


def read_urls(path, err=None):
    try:
        with open(path, encoding='utf-8') as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        logging.exception(f'cannot read {path}')
        raise SourceReadFailure(path, e) from e
    logging.info(f'read {len(text)} characters from {path}')
    return parse_urls(text, err)
