"""Ayah Cards - Turn Quran verse ranges into themed, render-ready cards."""

__version__ = "0.1.0"
