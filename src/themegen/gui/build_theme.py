"""
Builds theme-generated.css from theme.css.j2 and design_tokens.py without external deps.
Usage:
    python -m themegen
"""
from __future__ import annotations

import logging
import re
from pathlib import Path

from . import design_tokens as T
from .design_tokens import TokenTable, Variant

logger = logging.getLogger(__name__)

HERE = Path(__file__).parent
TEMPLATE = HERE / "theme.css.j2"
OUTPUT = Path("public") / "theme-generated.css"
CONFIRMATION = "Generated theme file."

# Very small Jinja-like replacement (no external deps)
TOKEN_PATTERN = re.compile(r"{{\s*([A-Z_]+)\s*}}")

# Template placeholder -> (body class, variant). AUTO_DARK_BLOCK sits inside the
# prefers-color-scheme: dark query and uses BLACK, not DARK.
BLOCKS: dict[str, tuple[str, Variant]] = {
    "AUTO_BLOCK": ("auto", Variant.LIGHT),
    "AUTO_DARK_BLOCK": ("auto", Variant.BLACK),
    "LIGHT_BLOCK": ("light", Variant.LIGHT),
    "DARK_BLOCK": ("dark", Variant.DARK),
    "BLACK_BLOCK": ("black", Variant.BLACK),
}


def render_template(template_text: str, context: dict[str, str]) -> str:
    def replace(match: re.Match[str]) -> str:
        key = match.group(1)
        if key not in context:
            raise KeyError(f"Missing token '{key}' in context")
        return str(context[key])

    return TOKEN_PATTERN.sub(replace, template_text)


def render_definitions(table: TokenTable, variant: Variant) -> str:
    """Format one custom-property line per token, each ending in a newline."""
    return "".join(f"  --{name}: {values[variant]};\n" for name, values in table.items())


def theme_block(
    selector: str,
    variant: Variant,
    root: TokenTable = T.THEME_VARIABLES,
    child: TokenTable = T.CHILD_VARIABLES,
) -> str:
    """Root tokens under ``body.<selector>``, child tokens under ``body.<selector> *``."""
    return (
        f"body.{selector} {{\n{render_definitions(root, variant)}}}\n"
        f"body.{selector} * {{\n{render_definitions(child, variant)}}}"
    )


def render_document(
    root: TokenTable = T.THEME_VARIABLES,
    child: TokenTable = T.CHILD_VARIABLES,
    template_path: Path = TEMPLATE,
) -> str:
    tpl = template_path.read_text(encoding="utf-8")
    context = {
        key: theme_block(selector, variant, root, child)
        for key, (selector, variant) in BLOCKS.items()
    }
    return render_template(tpl, context)


def build(output: Path | str = OUTPUT) -> Path:
    """Render the stylesheet and write it to ``output``.

    The parent directory must already exist. Write errors are not handled
    here; they propagate to the caller.
    """
    out_path = Path(output)
    css = render_document()
    logger.debug("Rendered %d bytes for %d root and %d child tokens",
                 len(css), len(T.THEME_VARIABLES), len(T.CHILD_VARIABLES))
    out_path.write_text(css, encoding="utf-8", newline="\n")
    logger.info("Wrote %s", out_path)
    return out_path


def check(output: Path | str = OUTPUT) -> bool:
    """Return True when ``output`` matches a fresh render byte for byte."""
    out_path = Path(output)
    if not out_path.exists():
        logger.warning("Generated file is missing: %s", out_path)
        return False
    current = out_path.read_bytes()
    expected = render_document().encode("utf-8")
    if current != expected:
        logger.warning("Generated file is out of date: %s", out_path)
        return False
    logger.info("Generated file is up to date: %s", out_path)
    return True
