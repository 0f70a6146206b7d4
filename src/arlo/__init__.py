"""arlo: full-stack Vite + Go project scaffolding."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("arlo")
except PackageNotFoundError:
    __version__ = "0.0.0"
