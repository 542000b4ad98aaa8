import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()

REQUIRED_KEYS = (
    "ADMIN_JWT_SECRET",
    "ADMIN_JWT_EXPIRATION_HOURS",
    "USER_JWT_SECRET",
    "USER_JWT_EXPIRATION_HOURS",
)


class ConfigurationError(Exception):
    """Raised at startup when required configuration is missing or invalid"""


def _get(key, default=None, parse=True):
    """env.yaml first, then an environment variable of the same name, then default"""
    if key in data:
        return data[key]
    if key in os.environ:
        if not parse:
            return os.environ[key]
        # Environment values are strings; YAML parses them into bool/int/list
        return yaml.safe_load(os.environ[key])
    return default


def _get_str(key, default=None):
    value = _get(key, default, parse=False)
    return None if value is None else str(value)


class ApplicationConfig:
    DB_URI = _get_str("DB_URI", "sqlite+aiosqlite:///./fleet_admin.db")
    DB_ECHO = bool(_get("DB_ECHO", False))
    DB_AUTO_CREATE = bool(_get("DB_AUTO_CREATE", True))
    API_PORT = int(_get("API_PORT", 8000))
    API_HOST = _get_str("API_HOST", "0.0.0.0")
    CORS_ORIGINS = _get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = bool(_get("CORS_ALLOW_CREDENTIALS", True))
    LOG_LEVEL = _get_str("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(_get("ENABLE_LOGGING_MIDDLEWARE", 1))
    BCRYPT_ROUNDS = int(_get("BCRYPT_ROUNDS", 12))

    # Token namespaces; no defaults, startup fails without them
    ADMIN_JWT_SECRET = _get_str("ADMIN_JWT_SECRET")
    ADMIN_JWT_EXPIRATION_HOURS = _get("ADMIN_JWT_EXPIRATION_HOURS")
    USER_JWT_SECRET = _get_str("USER_JWT_SECRET")
    USER_JWT_EXPIRATION_HOURS = _get("USER_JWT_EXPIRATION_HOURS")

    @classmethod
    def validate(cls) -> None:
        """
        Check required settings.

        Raises:
            ConfigurationError: naming every missing key and every bad expiration
        """
        problems = [
            f"{key} is required"
            for key in REQUIRED_KEYS
            if getattr(cls, key, None) in (None, "")
        ]

        for key in ("ADMIN_JWT_EXPIRATION_HOURS", "USER_JWT_EXPIRATION_HOURS"):
            value = getattr(cls, key, None)
            if value in (None, ""):
                continue
            try:
                hours = float(value)
            except (TypeError, ValueError):
                problems.append(f"{key} must be a number of hours")
                continue
            if hours <= 0:
                problems.append(f"{key} must be positive")

        if problems:
            raise ConfigurationError("; ".join(problems))
