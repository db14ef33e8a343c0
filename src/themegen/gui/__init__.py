"""Theme subpackage.

- design_tokens: the root and child token tables
- shadows: box-shadow string builders used by the tables
- build_theme: renders the tables into the generated stylesheet
"""
# Import explicitly to avoid F403
from .build_theme import build, check, render_document, theme_block
from .design_tokens import CHILD_VARIABLES, THEME_VARIABLES, Variant

__all__ = [
    "build",
    "check",
    "render_document",
    "theme_block",
    "CHILD_VARIABLES",
    "THEME_VARIABLES",
    "Variant",
]
