"""Layout containers, focus handling and a one-line input field for terminal interfaces."""

__version__ = "0.1.0"

__all__ = [
    "autocomplete",
    "element",
    "flex",
    "focus",
    "frame",
    "grid",
    "gridtracks",
    "inputfield",
    "keys",
    "lineedit",
    "options",
]