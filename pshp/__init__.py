# pshp/__init__.py
#
# Phil Shell Pro: read / tokenize / dispatch / execute loop.

__version__ = "0.1.0"
