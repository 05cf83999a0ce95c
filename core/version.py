from importlib import metadata

try:
    __version__ = metadata.version("dilemma-calculator")
except metadata.PackageNotFoundError:  # pragma: no cover - during local dev
    from dilemma import __version__
