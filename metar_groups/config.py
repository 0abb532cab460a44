"""
Constants shared by the group commands.
"""

# Direction code meaning "no prevailing wind direction"
VARIABLE_DIRECTION = "VRB"

# Wind speed unit assumed when the group omits one
DEFAULT_SPEED_UNIT = "KT"

# Encoded heights are in hundreds of feet
HEIGHT_FACTOR = 100

MAX_DEGREES = 360
