from loguru import logger  # noqa
from importlib.metadata import version, PackageNotFoundError

logger.info("logobaker package loaded with loguru logger.")

try:
    __version__ = version("logobaker")
except PackageNotFoundError:
    __version__ = "0.0.0"
