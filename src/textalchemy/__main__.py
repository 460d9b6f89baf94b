# topmark:header:start
#
#   project      : TextAlchemy
#   file         : __main__.py
#   file_relpath : src/textalchemy/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running TextAlchemy via ``python -m textalchemy``.

It delegates directly to :func:`textalchemy.cli.main.cli`, so the console script
and the module invocation share a single CLI entry point.

Examples:
    Render a JSON file as a Markdown tree::

        python -m textalchemy render data.json --format markdown
"""

from __future__ import annotations

from textalchemy.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
