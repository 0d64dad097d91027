"""jmc - a personal restaurant list and recommender."""

__version__ = "0.1.0"
