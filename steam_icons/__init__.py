"""
Steam Icon Restorer: download missing Steam shortcut icons into Steam's icon cache.
"""

__version__ = "1.0.0"
