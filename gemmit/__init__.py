"""AI-assisted interactive commit tool backed by Google Gemini."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("gemmit")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
