#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Validation Utils - credential validation rules
"""

import re
from typing import Optional

MIN_PASSWORD_LENGTH = 6

REQUIRED_MESSAGE = "Email and password are required"
INVALID_EMAIL_MESSAGE = "Please enter a valid email address"
SHORT_PASSWORD_MESSAGE = f"Password must be at least {MIN_PASSWORD_LENGTH} characters"

# local part, "@", domain part containing a "."
EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")


class ValidationUtils:
    """Local checks run before contacting the auth provider"""

    @staticmethod
    def is_valid_email(email: str) -> bool:
        """
        Basic shape check of an email address.

        Args:
            email (str): raw field value, trimmed before matching

        Returns:
            bool: whether the value looks like an email address
        """
        return EMAIL_PATTERN.search(email.strip()) is not None

    @staticmethod
    def validate_credentials(email: str, password: str) -> Optional[str]:
        """
        Run the checks in order and stop at the first failure.

        Args:
            email (str): email field value
            password (str): password field value

        Returns:
            Optional[str]: error message, or None when the input is acceptable
        """
        if not email or not password:
            return REQUIRED_MESSAGE
        if not ValidationUtils.is_valid_email(email):
            return INVALID_EMAIL_MESSAGE
        if len(password) < MIN_PASSWORD_LENGTH:
            return SHORT_PASSWORD_MESSAGE
        return None
