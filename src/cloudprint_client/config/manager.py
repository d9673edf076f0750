"""
Config file access for the Cloud Print client.

Files are TOML (or JSON) with a [cloudprint] section holding the account and
endpoints, and an optional [logging] section.
"""
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import toml

DEFAULT_CONFIG_PATHS = (
    Path.home() / '.cloudprint_client' / 'config.toml',
    Path('config.toml'),
)


@dataclass
class CloudPrintSettings:
    """The [cloudprint] section; blank optional values fall back to client defaults."""
    username: str
    password: str
    source: Optional[str] = None
    base_url: Optional[str] = None
    login_url: Optional[str] = None


def find_config_file() -> Optional[Path]:
    return next((p for p in DEFAULT_CONFIG_PATHS if p.exists()), None)


class ConfigManager:
    """Loads a config file and exposes its values by dotted key."""

    def __init__(self, config_file: str = None):
        """
        Args:
            config_file: Path to config file. If None, the first existing default path is used.
        """
        path = Path(config_file) if config_file else find_config_file()
        self.config_file: Optional[Path] = path
        self.config = {}
        self.load_config()

    def exists(self) -> bool:
        return bool(self.config_file and self.config_file.exists())

    def load_config(self):
        if not self.exists():
            return

        if self.config_file.suffix == '.json':
            self.config = json.loads(self.config_file.read_text())
        else:
            self.config = toml.load(self.config_file)

    def save_config(self):
        if not self.config_file:
            raise ValueError("No config file specified")

        self.config_file.parent.mkdir(parents=True, exist_ok=True)
        if self.config_file.suffix == '.json':
            self.config_file.write_text(json.dumps(self.config, indent=4))
        else:
            with open(self.config_file, 'w') as f:
                toml.dump(self.config, f)

    def get(self, key: str, default=None):
        """Look up 'section.key'; missing sections or keys return `default`."""
        node = self.config
        for part in key.split('.'):
            if not isinstance(node, dict) or node.get(part) is None:
                return default
            node = node[part]
        return node

    @property
    def logging_level(self) -> str:
        return str(self.get('logging.level', 'INFO')).upper()

    @property
    def logging_file(self) -> Optional[str]:
        return self.get('logging.file')

    def cloudprint_settings(self) -> CloudPrintSettings:
        """
        Read the [cloudprint] section.

        Raises:
            ValueError: If username or password is missing
        """
        username = self.get('cloudprint.username')
        password = self.get('cloudprint.password')
        if not username or not password:
            raise ValueError("Config requires 'cloudprint.username' and 'cloudprint.password'")

        return CloudPrintSettings(
            username=username,
            password=password,
            source=self.get('cloudprint.source'),
            base_url=self.get('cloudprint.base_url'),
            login_url=self.get('cloudprint.login_url'),
        )
