"""
CSS custom property rendering for generated themes. Output is plain text;
nothing here touches a document.
"""
from __future__ import annotations
from typing import Dict, Mapping

Theme = Mapping[str, Mapping]

DARK_SELECTOR = ":root[data-theme-mode='dark']"

# alias → (role, shade) pairs resolved against the theme's own variables
SEMANTIC_ALIASES: Dict[str, tuple] = {
    "bg-page": ("gray", "50"),
    "bg-component": ("gray", "100"),
    "bg-component-hover": ("gray", "150"),
    "bg-success": ("success", "50"),
    "bg-warning": ("warning", "50"),
    "bg-error": ("danger", "50"),
    "bg-info": ("info", "50"),
    "text-primary": ("gray", "900"),
    "text-secondary": ("gray", "700"),
    "text-tertiary": ("gray", "500"),
    "text-disabled": ("gray", "400"),
    "text-link": ("primary", "500"),
    "text-link-hover": ("primary", "600"),
    "text-success": ("success", "600"),
    "text-warning": ("warning", "600"),
    "text-error": ("danger", "600"),
    "text-info": ("info", "600"),
    "border": ("gray", "300"),
    "border-light": ("gray", "200"),
    "border-dark": ("gray", "400"),
}


def variable_name(prefix: str, semantic: str, shade) -> str:
    """``--{prefix}-{semantic}-{shade}``"""
    return f"--{prefix}-{semantic}-{shade}"


def css_variables(theme: Theme, prefix: str = "color") -> Dict[str, str]:
    """Flatten a theme into an ordered dict of custom property name → value."""
    return {
        variable_name(prefix, semantic, shade): value
        for semantic, scale in theme.items()
        for shade, value in scale.items()
    }


def semantic_alias_variables(theme: Theme, prefix: str = "color") -> Dict[str, str]:
    """Aliases such as ``--color-text-primary: var(--color-gray-900)`` for shades the theme has."""
    aliases = {}
    for alias, (role, shade) in SEMANTIC_ALIASES.items():
        scale = theme.get(role)
        if scale is not None and any(str(k) == shade for k in scale):
            aliases[f"--{prefix}-{alias}"] = f"var({variable_name(prefix, role, shade)})"
    return aliases


def css_variables_block(
    theme: Theme,
    prefix: str = "color",
    selector: str = ":root",
    include_aliases: bool = False,
    indent: str = "  ",
) -> str:
    """Render a ``selector { ... }`` rule declaring every variable of the theme."""
    declarations = css_variables(theme, prefix)
    if include_aliases:
        declarations.update(semantic_alias_variables(theme, prefix))
    body = "\n".join(f"{indent}{name}: {value};" for name, value in declarations.items())
    return f"{selector} {{\n{body}\n}}"


def themed_css_variables(
    pair: Mapping[str, Theme],
    prefix: str = "color",
    dark_selector: str = DARK_SELECTOR,
    include_aliases: bool = False,
) -> str:
    """Light variables on ``:root`` followed by dark overrides on ``dark_selector``."""
    return "\n\n".join([
        css_variables_block(pair["light"], prefix, ":root", include_aliases),
        css_variables_block(pair["dark"], prefix, dark_selector, include_aliases),
    ])
