"""
termfx - time-driven effects for terminal cell buffers

Fades, dissolves, directional sweeps and slides, paints and expansions over a
grid of Rich-styled cells, composed sequentially or in parallel and scoped
with filters and spatial patterns. A Textual widget (``termfx.Widgets``)
hosts the engine inside a Textual app.
"""

__version__ = "0.1.0"
