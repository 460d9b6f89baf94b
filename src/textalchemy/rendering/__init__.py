# topmark:header:start
#
#   project      : TextAlchemy
#   file         : __init__.py
#   file_relpath : src/textalchemy/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Depth-bounded tree renderers.

Each module renders a dynamic value in one encoding; `textalchemy.rendering.tree`
dispatches on `textalchemy.core.formats.RenderFormat`.
"""
