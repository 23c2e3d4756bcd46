"""
Core forest generation functionality.
"""

from .alea_prng import AleaPRNG, hash_seed
from .exceptions import ConfigurationError, ForestGenError, PatchPlacementExhausted
from .forest_config import ForestConfig
from .forest_generator import ForestGenerator, ForestMap, StageSnapshot, generate_forest
from .grid import Cell, ForestGrid, Point

__all__ = ['AleaPRNG', 'hash_seed', 'ConfigurationError', 'ForestGenError',
           'PatchPlacementExhausted', 'ForestConfig', 'ForestGenerator', 'ForestMap',
           'StageSnapshot', 'generate_forest', 'Cell', 'ForestGrid', 'Point']
