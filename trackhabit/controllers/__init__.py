"""
Controllers package for TrackHabit

This package contains the form logic, navigation and event handlers.
"""

from .credential_form_controller import CredentialFormController
from .navigator import Navigator, PageNavigator
from .auth_controller import AuthController

__all__ = [
    'CredentialFormController',
    'Navigator',
    'PageNavigator',
    'AuthController'
]
