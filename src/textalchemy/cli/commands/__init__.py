# topmark:header:start
#
#   project      : TextAlchemy
#   file         : __init__.py
#   file_relpath : src/textalchemy/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TextAlchemy CLI subcommands, one module per command."""
