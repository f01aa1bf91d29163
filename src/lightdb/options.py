import logging
import pathlib
from dataclasses import dataclass

from libb import ConfigOptions

__all__ = [
    'ConnectorOptions',
    'read_settings_file',
]

logger = logging.getLogger(__name__)


@dataclass
class ConnectorOptions(ConfigOptions):
    """Options

    url is any SQLAlchemy URL, e.g. `sqlite:///app.db`,
    `postgresql+psycopg://localhost:5432/app` or `mysql+pymysql://localhost/app`.
    username and password, when set, replace the ones embedded in the url.
    timeout is the driver connect timeout in seconds (0 leaves the driver default).
    """
    url: str = None
    username: str = None
    password: str = None
    timeout: int = 0

    def __post_init__(self):
        if not self.url:
            raise ValueError('url is required')
        if self.timeout < 0:
            raise ValueError('timeout must not be negative')


def read_settings_file(path: str | pathlib.Path) -> tuple[str | None, str | None, str | None]:
    """Read url, username and password from a three-line settings file.

    Lines are taken verbatim apart from the line terminator; there is no
    quoting, escaping or comment syntax. Missing lines read as None.

    Settings file example::

        sqlite:///inventory.db
        alice
        secret

    Raises OSError when the file cannot be read.
    """
    lines = pathlib.Path(path).read_text().splitlines()
    lines += [None] * (3 - len(lines))
    url, username, password = lines[:3]
    logger.debug(f'Loaded connector settings from {path}')
    return url, username, password
