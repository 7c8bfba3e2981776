"""Top level package for the sol_swapnorm project."""
from importlib import metadata


def get_version() -> str:
    """Return the installed package version.

    Resolves the version declared in ``pyproject.toml`` through
    ``importlib.metadata``; a plain source checkout reports ``0.0.0``.
    """

    try:
        return metadata.version("sol-swapnorm")
    except metadata.PackageNotFoundError:  # pragma: no cover - during tests
        return "0.0.0"


__all__ = ["get_version"]
