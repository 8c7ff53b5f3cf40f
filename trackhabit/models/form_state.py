#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Form State - state types for the credential entry form
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class FormMode(Enum):
    """Whether the form signs in to an existing account or creates one"""

    SIGN_IN = "signin"
    SIGN_UP = "signup"

    @property
    def label(self) -> str:
        return "Sign In" if self is FormMode.SIGN_IN else "Sign Up"

    @property
    def title(self) -> str:
        return "Welcome Back" if self is FormMode.SIGN_IN else "Create Account"

    @property
    def other(self) -> "FormMode":
        return FormMode.SIGN_UP if self is FormMode.SIGN_IN else FormMode.SIGN_IN

    @classmethod
    def from_label(cls, label: str) -> "FormMode":
        """Map a radio label ("Sign In"/"Sign Up") or a raw value to a mode."""
        for mode in cls:
            if label in (mode.label, mode.value):
                return mode
        raise ValueError(f"Unknown form mode: {label!r}")


class SubmitResult(Enum):
    """Outcome of a single submit() call"""

    AUTHENTICATED = "authenticated"  # sign-in succeeded, navigated away
    REGISTERED = "registered"        # sign-up succeeded, still on the form
    REJECTED = "rejected"            # provider returned an error
    INVALID = "invalid"              # local validation failed
    IGNORED = "ignored"              # a submission was already pending


@dataclass
class FormState:
    """Transient state of one form session."""

    mode: FormMode = FormMode.SIGN_IN
    email: str = ""
    password: str = ""
    busy: bool = False
    error: Optional[str] = None
    reveal_password: bool = False
