"""
walkpwd - Local password vault CLI.

Stores named secrets on disk and delivers them through the system clipboard.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("walkpwd")
except PackageNotFoundError:
    __version__ = "0.1.0"

__all__ = [
    "__version__",
]
