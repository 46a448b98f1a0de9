"""shipdisc — zip-targeted shipping rate discount campaigns."""

__version__ = "0.1.0"
