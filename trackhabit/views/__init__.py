"""
Views package for TrackHabit

This package contains all UI components and layouts.
"""

from .auth_view import AuthView
from .home_view import HomeView

__all__ = [
    'AuthView',
    'HomeView'
]
