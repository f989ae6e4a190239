"""
Defaults used when rendering trees
"""

GUIDE_STYLE = "dim"
ID_STYLE = "bold cyan"
VALUE_STYLE = ""
ID_SEPARATOR = ": "
