"""
section-kit - Content section renderers with hook extension points.

Layouts: card grid, media strip, detail view, slideshow.
"""

__version__ = "0.1.0"
