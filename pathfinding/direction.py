class Direction:
    NORTH_WEST = (-1, -1)
    WEST = (-1, 0)
    SOUTH_WEST = (-1, 1)
    NORTH = (0, -1)
    SOUTH = (0, 1)
    NORTH_EAST = (1, -1)
    EAST = (1, 0)
    SOUTH_EAST = (1, 1)

    # Raster order: dx outer, dy inner. Tie-breaking in the search depends on it.
    ALL_DIRECTIONS = [
        ('NORTH_WEST', NORTH_WEST),
        ('WEST', WEST),
        ('SOUTH_WEST', SOUTH_WEST),
        ('NORTH', NORTH),
        ('SOUTH', SOUTH),
        ('NORTH_EAST', NORTH_EAST),
        ('EAST', EAST),
        ('SOUTH_EAST', SOUTH_EAST),
    ]

