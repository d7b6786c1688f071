from tablescope.stylesheet.parser import (
    find_style_blocks,
    parse_style_rules,
    rewrite_selectors,
    rewrite_style_blocks,
)

__all__ = ["find_style_blocks", "parse_style_rules", "rewrite_selectors", "rewrite_style_blocks"]
