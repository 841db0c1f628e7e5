"""
Exposes the version of mollweide
"""

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

# Source checkouts carry the release number in the repo-root VERSION file
_VERSION_FILE = Path(__file__).resolve().parents[1] / 'VERSION'

try:
    __version__ = version('mollweide')
except PackageNotFoundError:
    __version__ = (
        _VERSION_FILE.read_text(encoding='utf-8').strip() if _VERSION_FILE.is_file() else None
    )

__all__ = ['__version__']
