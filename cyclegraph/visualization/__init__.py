"""
Visualization functions for cyclegraph.

This module provides functions for drawing cycle graphs.
"""

from .network import *
