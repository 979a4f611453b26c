"""
    Tests for setup
"""

import sys

from netflix_insights.settings.base import PathsSettings


def test_python_version() -> None:
    """Runs on a supported Python version (>= 3.12)."""
    assert sys.version_info.major == 3
    assert sys.version_info.minor >= 12


def test_settings_load() -> None:
    """Base configuration loads without error."""
    paths = PathsSettings()
    assert isinstance(paths.model_dump(), dict)


def test_package_importable() -> None:
    """The netflix_insights package is importable."""
    import netflix_insights

    assert netflix_insights.__version__
