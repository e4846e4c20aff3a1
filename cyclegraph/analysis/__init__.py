"""
Analysis functions for cycle graphs.
"""

from .metrics import *
