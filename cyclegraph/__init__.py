"""
cyclegraph - An implicit, memory-free cycle graph for Python graph tooling.
"""

__version__ = '0.1.0'

# Import main submodules for easy access
from . import core
from . import io
from . import analysis
from . import visualization
from . import utils

from .core.base import AbstractGraph, Edge
from .core.graph import CycleGraph
from .config import GraphConfig
