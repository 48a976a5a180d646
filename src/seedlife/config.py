# Settings shared by the simulation, validation and rendering code.

import os


# Reference grid used by every seed in the catalog.
CELLULES_WIDTH = 50
CELLULES_HEIGHT = 40

# Number of past grids kept for loop detection.
MAXIMUM_LOOP_TURN_COUNT = 1600
# Hard cap on generations for a single run.
MAXIMUM_STEP_COUNT = 4000

# Each cellule is drawn as a square block of pixels.
PIXELS_PER_CELLULE = 10

output_root = os.environ.get('SEEDLIFE_OUTPUT_ROOT', './seed-images/')
# If empty, logs go to stderr. Stdout is reserved for JSON results.
log_root = os.environ.get('SEEDLIFE_LOG_ROOT', '')
