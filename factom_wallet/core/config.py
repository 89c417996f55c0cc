#factom_wallet/core/config.py
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from factom_wallet.core.exceptions import ConfigError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("text", "json")

# environment variable -> (field, converter)
ENV_OVERRIDES = {
    "FACTOM_WALLETD_URL": ("walletd_url", str),
    "FACTOM_FACTOMD_URL": ("factomd_url", str),
    "FACTOM_REQUEST_TIMEOUT": ("request_timeout", float),
    "FACTOM_LOG_LEVEL": ("log_level", str),
}

@dataclass
class WalletConfig:
    """Wallet client configuration"""
    walletd_url: str = "http://localhost:8089/v2"
    factomd_url: str = "http://localhost:8088/v2"
    request_timeout: float = 30.0
    user_agent: str = "factom-wallet/1.0"
    log_level: str = "INFO"
    log_format: str = "text"
    log_file: Optional[str] = None

    def __post_init__(self):
        """Normalize and validate values after object creation"""
        self.log_level = str(self.log_level).upper()
        self.log_format = str(self.log_format).lower()
        try:
            self.request_timeout = float(self.request_timeout)
        except (TypeError, ValueError):
            raise ConfigError(f"Invalid request timeout: {self.request_timeout!r}")

        if self.request_timeout <= 0:
            raise ConfigError(f"Request timeout must be positive, got {self.request_timeout}")
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(f"Unknown log level: {self.log_level}")
        if self.log_format not in LOG_FORMATS:
            raise ConfigError(f"Unknown log format: {self.log_format}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WalletConfig":
        """Build a config, ignoring keys that are not config fields"""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

def load_config(config_path: Optional[str] = None,
                environ: Optional[Dict[str, str]] = None) -> WalletConfig:
    """Load configuration from an optional YAML file, then the environment"""
    data: Dict[str, Any] = {}

    if config_path:
        config_file = Path(config_path)
        if not config_file.exists():
            raise ConfigError(f"Config file not found: {config_path}")
        try:
            with open(config_file, 'r') as f:
                loaded = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Error loading config file: {e}") from e
        if not isinstance(loaded, dict):
            raise ConfigError(f"Config file must contain a mapping: {config_path}")
        # accept both a flat file and one nested under "wallet"
        data.update(loaded.get("wallet", loaded))

    environ = os.environ if environ is None else environ
    for var, (name, convert) in ENV_OVERRIDES.items():
        if var in environ:
            try:
                data[name] = convert(environ[var])
            except ValueError as e:
                raise ConfigError(f"Invalid value for {var}: {environ[var]!r}") from e

    return WalletConfig.from_dict(data)
