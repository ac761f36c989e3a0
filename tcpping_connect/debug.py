import sys
from tcpping_connect.env import log_level

LOG_LEVELS = {
    'debug': 0,
    'info': 1,
    'warn': 2,
    'error': 3,
    'critical': 4,
}

def log(message, level='info'):
    # stdout carries the probe result line only
    threshold = LOG_LEVELS.get(log_level(), LOG_LEVELS['warn'])
    if LOG_LEVELS[level] >= threshold:
        print(f"[{level.upper()}] {message}", file=sys.stderr)
