"""
Configuration file for the collinear-points pipeline.

Modules should read values using the get_active_params() function.
"""

# ---------------------------------------------------------------
# I/O PATHS
# ---------------------------------------------------------------

INPUT_POINTS_PATTERN = "collinear/*.txt"
OUTPUT_FOLDER = "output"


# ---------------------------------------------------------------
# DRAWING PARAMETERS
# ---------------------------------------------------------------

COORD_MAX = 32768                  # input coordinates live in [0, COORD_MAX)
CANVAS_SIZE = 512                  # output images are CANVAS_SIZE x CANVAS_SIZE
FLIP_Y = True                      # y grows upwards, as on a plot

POINT_RADIUS = 3
SEGMENT_THICKNESS = 1


# ---------------------------------------------------------------
# VISUALIZATION COLORS
# ---------------------------------------------------------------

COLOR_POINT = (0, 0, 0) #Input points - black
COLOR_SEGMENT = (255, 0, 0) #Detected segments - blue
COLOR_BACKGROUND = (255, 255, 255) #Canvas - white


# ---------------------------------------------------------------
# PARAMETER ACCESS LOGIC
# ---------------------------------------------------------------

def get_active_params():
    """
    Returns the active set of parameters as one dictionary.
    Used by the drawing code so it only imports one name.
    """

    return {
        "COORD_MAX": COORD_MAX,
        "CANVAS_SIZE": CANVAS_SIZE,
        "FLIP_Y": FLIP_Y,
        "POINT_RADIUS": POINT_RADIUS,
        "SEGMENT_THICKNESS": SEGMENT_THICKNESS,
        "COLOR_POINT": COLOR_POINT,
        "COLOR_SEGMENT": COLOR_SEGMENT,
        "COLOR_BACKGROUND": COLOR_BACKGROUND,
    }
