"""
scriptsynth - synthesizes the implicit symbols host-framework conventions add to script classes.
"""

__version__ = "0.1.0"
