# topmark:header:start
#
#   project      : TextAlchemy
#   file         : __init__.py
#   file_relpath : src/textalchemy/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core data model shared by the renderers, the decoder and the CLI.

The modules in this package are Click-free and perform no I/O.
"""
