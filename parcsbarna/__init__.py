"""Catalogue of playground areas: locations, play objects, a sorted registry and a console menu."""

__version__ = "0.1.0"