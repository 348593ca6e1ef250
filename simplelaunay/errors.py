class CapacityError(ValueError):
    """A triangle buffer is too small for the requested vertex count."""


class DegenerateInputError(ValueError):
    """The point set cannot be triangulated (empty, non-finite or duplicated points)."""


class DegenerateTriangleError(ValueError):
    """Three vertices are collinear, so their circumcircle is undefined."""
