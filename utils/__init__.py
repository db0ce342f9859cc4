"""
Utility modules
"""

from .input_parser import InputParser, InputValidationError
from .visualization import Visualizer

__all__ = ['InputParser', 'InputValidationError', 'Visualizer']
