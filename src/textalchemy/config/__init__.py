# topmark:header:start
#
#   project      : TextAlchemy
#   file         : __init__.py
#   file_relpath : src/textalchemy/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration: runtime settings, TOML sources and logging setup."""
