"""Visualisation helpers for tagcloud.

Quick access::

    from tagcloud.viz import plot_layout, plot_spiral
"""

from tagcloud.viz.layout import plot_layout, plot_spiral

__all__ = [
    "plot_layout",
    "plot_spiral",
]
