"""
Utility functions for the cyclegraph package.
"""

from .logger import *
