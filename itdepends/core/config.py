"""Configuration management for itdepends."""
import os
from dataclasses import dataclass
from dataclasses import field

import dotenv

from itdepends.__version__ import __version__

# Pause between two registry requests, in seconds.
# search.maven.org is a shared public service without an SLA.
REQUEST_DELAY = 1.0

MAVEN_CENTRAL_SEARCH_URL = 'https://search.maven.org/solrsearch/select'


@dataclass
class RegistryConfig:
    """Registry (Maven Central search) configuration."""
    base_url: str = field(
        default_factory=lambda: os.getenv(
            'ITDEPENDS_REGISTRY_URL', MAVEN_CENTRAL_SEARCH_URL,
        ),
    )
    rows: int = 1
    timeout: float = field(
        default_factory=lambda: float(
            os.getenv('ITDEPENDS_REGISTRY_TIMEOUT', '300'),
        ),
    )
    request_delay: float = field(
        default_factory=lambda: float(
            os.getenv('ITDEPENDS_REQUEST_DELAY', str(REQUEST_DELAY)),
        ),
    )
    user_agent: str = f'itdepends/{__version__}'


@dataclass
class LoggingConfig:
    level: str = field(
        default_factory=lambda: os.getenv('ITDEPENDS_LOG_LEVEL', 'WARNING').upper(),
    )


@dataclass
class ItDependsConfig:
    registry: RegistryConfig = field(default_factory=RegistryConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    input_format: str = 'maven'

    @classmethod
    def load(cls) -> 'ItDependsConfig':
        dotenv.load_dotenv()
        return cls()


_config: ItDependsConfig | None = None


def get_config() -> ItDependsConfig:
    global _config
    if _config is None:
        _config = ItDependsConfig.load()
    return _config
