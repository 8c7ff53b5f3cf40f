"""
Utils package for TrackHabit

This package contains utility functions and helper classes.
"""

from .network_utils import NetworkUtils
from .state_utils import StateUtils
from .validation_utils import ValidationUtils

__all__ = [
    'NetworkUtils',
    'StateUtils',
    'ValidationUtils'
]
