"""Exceptions raised by the torus renderer."""


class DonutError(Exception):
    """Base class for all renderer errors."""


class ConfigurationError(DonutError, ValueError):
    """
    A configuration value makes rendering impossible.

    Raised at construction time (sampling steps that would never terminate, a camera
    sitting inside the object, an empty glyph ramp, ...) so that a bad setup fails before
    the first frame instead of part-way through the animation.
    """
