"""Package version for recency-cache.

Installed copies report the version recorded in their distribution metadata.
A source checkout that was never installed has no metadata, so the version
is read from the ``pyproject.toml`` beside the package instead.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("recency-cache")
except PackageNotFoundError:
    import tomllib
    from pathlib import Path

    _pyproject = Path(__file__).resolve().parent.parent / "pyproject.toml"
    try:
        with _pyproject.open("rb") as fh:
            __version__ = tomllib.load(fh)["project"]["version"]
    except (OSError, KeyError, tomllib.TOMLDecodeError):
        __version__ = "0.0.0-dev"
