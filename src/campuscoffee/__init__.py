"""CampusCoffee: points of sale and users on a university campus."""

__version__ = "0.1.0"
