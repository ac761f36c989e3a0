import math
import os

from dotenv import load_dotenv

from tcpping_connect.cli import get_args

DEFAULT_TIMEOUT = 1.0
TIMEOUT_ENV_VARS = ('TCPPING_TIMEOUT', 'TCPPING_TIMEOUT_SEC')


def config_dir():
  return os.environ.get('TCPPING_CONFIG_DIR', '/etc/tcpping_connect')

def env_file():
  return os.path.join(config_dir(), '.env')

def load_env_file():
  # Process environment wins over the file
  return load_dotenv(dotenv_path=env_file(), override=False)

def _positive_float(value):
  value = (value or '').strip()
  if not value or '_' in value:
    return None
  try:
    f = float(value)
  except ValueError:
    return None
  if not math.isfinite(f) or f <= 0:
    return None
  return f

def default_timeout(getenv=os.environ.get):
  """Resolve the default per-attempt timeout in seconds.

  Each variable in TIMEOUT_ENV_VARS is applied in turn; a later valid value
  replaces an earlier one and invalid values are ignored.
  """
  timeout = DEFAULT_TIMEOUT
  for name in TIMEOUT_ENV_VARS:
    value = _positive_float(getenv(name))
    if value is not None:
      timeout = value
  return timeout

def debug_mode():
  # Check environment variable first
  if os.environ.get('TCPPING_DEBUG') == 'true':
    return True
  # Check parsed args
  args = get_args()
  return args is not None and getattr(args, 'debug', False)

def log_level():
  if debug_mode():
    return 'debug'
  else:
    return os.environ.get('LOG_LEVEL', 'warn')
