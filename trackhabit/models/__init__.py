"""
Models package for TrackHabit

This package contains form state types, the user store and auth providers.
"""

from .form_state import FormMode, FormState, SubmitResult
from .user_model import UserModel
from .auth_provider import AuthProvider, LocalAuthProvider

__all__ = [
    'FormMode',
    'FormState',
    'SubmitResult',
    'UserModel',
    'AuthProvider',
    'LocalAuthProvider'
]
