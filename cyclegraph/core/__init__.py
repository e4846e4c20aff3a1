"""
Core functionality for cyclegraph.

This module contains the graph interface, the implicit cycle graph and
the lazy sequences it hands out.
"""

from .base import *
from .graph import *
from .iterators import *
