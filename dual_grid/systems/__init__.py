"""Selection pipeline systems.

Pure functions, applied in this order for every display cell that needs a
repaint:

1. :mod:`~dual_grid.systems.sampler` reads the 4 bordering world cells.
2. :mod:`~dual_grid.systems.variant` picks an atlas tile per terrain.
3. :mod:`~dual_grid.systems.layer` stacks the terrains onto display layers.
4. :mod:`~dual_grid.systems.propagation` drives the above from world changes
   and performs the display writes.
"""
