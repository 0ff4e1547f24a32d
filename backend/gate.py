import logging

NOT_CHECKED = 0
MISMATCH_EXIT = 1


def check_status(expected, actual):
    """Exit the process when ``actual`` differs from a configured status."""
    if expected == NOT_CHECKED or expected == actual:
        return
    logging.info(f'expected status {expected}, got {actual}')
    raise SystemExit(MISMATCH_EXIT)
