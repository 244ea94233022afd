"""
Configuration for the web API, read from the environment.
"""

import os
import secrets
from dataclasses import dataclass, field


def _env_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


@dataclass
class WebConfig:
    secret_key:       str = field(default_factory=lambda: secrets.token_hex(32))
    max_upload_bytes: int = 4096
    log_level:        str = "INFO"
    cors_origins:     str = "*"

    @classmethod
    def from_env(cls) -> 'WebConfig':
        return cls(
            secret_key=os.environ.get('PKX_SECRET_KEY') or secrets.token_hex(32),
            max_upload_bytes=_env_int('PKX_MAX_UPLOAD_BYTES', 4096),
            log_level=os.environ.get('PKX_LOG_LEVEL', 'INFO').upper(),
            cors_origins=os.environ.get('PKX_CORS_ORIGINS', '*'),
        )
