import logging
import re
from datetime import datetime, timezone
from urllib.parse import urlencode


# Custom logging formatter to support colors
class ColoredFormatter(logging.Formatter):
    # Define color codes
    COLORS = {
        'DEBUG': '\033[94m',   # Blue
        'INFO': '\033[92m',    # Green
        'WARNING': '\033[93m', # Yellow
        'ERROR': '\033[91m',   # Red
        'CRITICAL': '\033[95m' # Magenta
    }
    RESET = '\033[0m'  # Reset color

    def format(self, record):
        levelname = record.levelname
        if levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}{levelname}{self.RESET}"

        return super().format(record)


# Filter to remove date from http access logs
class FilterRemoveDateFromWerkzeugLogs(logging.Filter):
    # '192.168.0.102 - - [30/Jun/2024 01:14:03] "%s" %s %s' -> '192.168.0.102 - "%s" %s %s'
    pattern: re.Pattern = re.compile(r' - - \[.+?] "')

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.msg, str):
            record.msg = self.pattern.sub(' - "', record.msg)
        return True


def now_utc():
    return datetime.now(timezone.utc)


def format_timestamp(timestamp, date_format="%d %b %Y, %H:%M"):
    """Format a Unix timestamp (UTC) for presentation"""
    return datetime.fromtimestamp(int(timestamp), tz=timezone.utc).strftime(date_format)


def append_query(url: str, **params) -> str:
    """Append query parameters to an url which may already carry a query string"""
    params = {k: v for k, v in params.items() if v is not None}
    if not params:
        return url
    separator = '&' if '?' in url else '?'
    return f"{url}{separator}{urlencode(params)}"


def get_or_create_secret_key(config_dir):
    """
    Generate or load a persistent secret key for Flask sessions.
    The key is stored in config_dir/.secret_key with restricted permissions.

    Returns:
        str: 64-character hex secret key
    """
    import os
    import secrets

    logger = logging.getLogger('main')
    secret_key_file = os.path.join(config_dir, '.secret_key')

    # Try to load existing key
    if os.path.exists(secret_key_file):
        try:
            with open(secret_key_file, 'r') as f:
                key = f.read().strip()
                if len(key) == 64:  # Validate key length
                    return key
                logger.warning("Invalid secret key found, generating new one")
        except OSError as e:
            logger.error(f"Error reading secret key: {e}")

    key = secrets.token_hex(32)  # 32 bytes = 64 hex chars

    try:
        os.makedirs(config_dir, exist_ok=True)
        with open(secret_key_file, 'w') as f:
            f.write(key)
        # owner read/write only
        os.chmod(secret_key_file, 0o600)
    except OSError as e:
        logger.error(f"Error saving secret key: {e}")

    return key
