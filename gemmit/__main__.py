"""Allow running gemmit with ``python -m gemmit``."""

from gemmit.cli import app

app()
