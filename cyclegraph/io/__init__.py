"""
Input/output functions for cyclegraph.

This module provides conversions between implicit cycle graphs and
explicit graph data (networkx graphs, edge tables, adjacency matrices).
"""

from .exporters import *
from .loaders import *
