from .color import Color, colors_to_array, array_to_colors, BLACK, WHITE, TRANSPARENT

__all__ = [
    "Color",
    "colors_to_array",
    "array_to_colors",
    "BLACK",
    "WHITE",
    "TRANSPARENT",
]
