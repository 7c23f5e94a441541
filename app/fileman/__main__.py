"""Allow running fileman as ``python -m fileman``."""

from fileman.cli.main import app

app(prog_name="fileman")
