"""pdatagen - Go accessor and test generator for pdata record types."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pdatagen")
except PackageNotFoundError:
    __version__ = "(local)"
