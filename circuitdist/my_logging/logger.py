import datetime
import json
import logging.config
import os
from logging import addLevelName

from circuitdist.config import cfg
from circuitdist.my_logging.log_context import full_log_context

# start time of this run, used to keep log files of consecutive runs apart
timestamp = '{:%Y-%m-%d_%H-%M-%S}'.format(datetime.datetime.now())

# Custom level below DEBUG for machine readable measurements (e.g. copy timings)
DATA = 5
addLevelName(DATA, "DATA")


def shutdown(handler_list=None):
    if handler_list is None:
        handler_list = []
    logging.shutdown(handler_list)


def data(key, value):
    """
    Log (key, value) to log-level DATA, tagged with the current log context
    """
    d = {'key': key, 'value': value, 'context': list(full_log_context)}
    return logging.log(DATA, json.dumps(d))


def get_log_file(label='default', parent_dir=None, filename='log', include_timestamp=True):
    """
    Return the common path prefix of the log files of one run.

    The files itself are created by :py:func:`prepare_logger` by appending '_info.log', '_debug.log' and '_data.log'.
    """
    if parent_dir is None:
        parent_dir = os.path.realpath(cfg.log_dir)
    log_dir = parent_dir if label is None else os.path.join(parent_dir, label)
    os.makedirs(log_dir, exist_ok=True)

    if include_timestamp:
        filename += '_' + timestamp
    return os.path.join(log_dir, filename)


def _file_handler(log_file: str, suffix: str, level: str, formatter: str = 'standard', **extra):
    handler = {
        'level': level,
        'formatter': formatter,
        'filename': f'{log_file}_{suffix}.log',
        'mode': 'w',
        'class': 'logging.FileHandler',
    }
    handler.update(extra)
    return handler


def prepare_logger(log_file=None, silent=True):
    """
    Route log records to the console (warnings and errors only) and to per-level files starting with 'log_file'.
    """
    shutdown()

    if log_file is None:
        log_file = get_log_file()

    if not silent:
        cfg.dist_print(f"Saving logs to {log_file}*...")

    logging.config.dictConfig({
        'version': 1,
        'formatters': {
            'standard': {
                'format': '%(asctime)s [%(levelname)s]: %(message)s',
                'datefmt': '%Y-%m-%d_%H-%M-%S'
            },
            'minimal': {
                'format': '%(message)s'
            },
        },
        'filters': {
            'onlydata': {
                '()': OnlyData
            }
        },
        'handlers': {
            'console': {
                'level': 'WARNING',
                'formatter': 'standard',
                'class': 'logging.StreamHandler',
            },
            'fileinfo': _file_handler(log_file, 'info', 'INFO'),
            'filedebug': _file_handler(log_file, 'debug', 'DEBUG'),
            'filedata': _file_handler(log_file, 'data', 'DATA', formatter='minimal', filters=['onlydata']),
        },
        'loggers': {
            '': {
                'handlers': ['console', 'fileinfo', 'filedebug', 'filedata'],
                'level': 0
            }
        }
    })


class OnlyData(logging.Filter):

    def filter(self, record):
        return record.levelno == DATA
