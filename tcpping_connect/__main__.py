import sys

from tcpping_connect.cli import parse_args
from tcpping_connect.config import ConfigError, ProbeConfig
from tcpping_connect.env import default_timeout, load_env_file
from tcpping_connect.runner import EXIT_USAGE, run


def start(argv=None):
    load_env_file()
    args = parse_args(argv, default_timeout=default_timeout())

    try:
        config = ProbeConfig.create(args.host, args.port, args.count, args.timeout)
    except ConfigError as e:
        print(e, file=sys.stderr)
        sys.exit(EXIT_USAGE)

    try:
        code, line = run(config)
    except KeyboardInterrupt:
        sys.exit(130)

    print(line)
    sys.exit(code)


if __name__ == '__main__':
    start()
