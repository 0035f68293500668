"""TasteTailor - style boards generated from cultural tastes."""

__version__ = "1.0.0"
