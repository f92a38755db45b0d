"""
geoquant: typed quantities for geodetic computation.

geoquant represents lengths, scale factors and time epochs tagged with an
EPSG unit-of-measure identity, converts them through a base unit per
dimension, and lets applications register their own units at runtime.
Heavy subsystems (the default unit catalog) are imported lazily to avoid
import-time side effects and circular imports.
"""

from importlib import metadata as _metadata

from loguru import logger as _logger

# Libraries stay quiet until the application calls geoquant.logging.setup_logging().
_logger.disable("geoquant")

# Try to read the installed package version first; fall back to a default for local dev.
try:
    __version__ = _metadata.version("geoquant")
except _metadata.PackageNotFoundError:
    import tomllib
    with open("pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

# Public names exposed by the package. Keep this minimal and stable.
__all__ = ["__version__"]
