"""Fixed geometry of an identicon.

These values define the image format itself and are not configurable:
a 16-byte digest feeds five mirrored rows of five cells, each cell
50 px wide, on a 250x250 canvas.
"""

DIGEST_SIZE = 16      # bytes in a 128-bit digest
ROW_SEED = 3          # digest bytes consumed per grid row
GRID_SIZE = 5         # cells per row and rows per grid
CELL_SIZE = 50        # pixels per cell edge
CANVAS_SIZE = GRID_SIZE * CELL_SIZE

GRID_CELLS = GRID_SIZE * GRID_SIZE
