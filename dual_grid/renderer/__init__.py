"""Rendering subpackage.

Composites the 4 in-memory display layers into a Pillow image. This is a
preview / debugging consumer of the display layers; hosts with their own
engine draw the layers themselves.

See :mod:`dual_grid.renderer.texture`.
"""
