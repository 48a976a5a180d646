# Simple logging util.

import logging
import pathlib
import sys
import time

from seedlife import config


LOG_FORMAT = '%(asctime)s | %(levelname)s | %(message)s'


def init_game_log(title, lvl = logging.INFO, top_dir = None):
    # top_dir overrides config.log_root. Without either, log to stderr.
    log_dir = top_dir or config.log_root
    if log_dir:
        pathlib.Path(log_dir).mkdir(parents=True, exist_ok=True)
        log_path = str(pathlib.Path(log_dir) / 'seedlife.log')
        logging.basicConfig(filename = log_path, level = lvl, format = LOG_FORMAT)
    else:
        log_path = '<stderr>'
        logging.basicConfig(stream = sys.stderr, level = lvl, format = LOG_FORMAT)
    msg = 'Game of life [{}] started logging at {}.'.format(title, log_path)
    logging.info(msg)
    return log_path


_last_mark = time.monotonic()


def format_elapsed(seconds):
    """ 3725.4 -> '1:02:05' """
    minutes, seconds = divmod(int(round(seconds)), 60)
    hours, minutes = divmod(minutes, 60)
    return '{}:{:02d}:{:02d}'.format(hours, minutes, seconds)


def timing():
    """ Elapsed time since the previous call, or since import. """
    global _last_mark
    now = time.monotonic()
    elapsed, _last_mark = now - _last_mark, now
    return format_elapsed(elapsed)
