#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Credential Form Controller - sign-in / sign-up form logic

Owns the form state (mode, fields, busy flag, error text), validates the
input and drives one auth provider call per submission. Results are exposed
as state only; nothing is raised to the presentation layer.
"""

from typing import Callable, List

from .navigator import Navigator
from ..models.auth_provider import AuthProvider
from ..models.form_state import FormMode, FormState, SubmitResult
from ..utils.validation_utils import ValidationUtils

UNEXPECTED_ERROR_MESSAGE = "Authentication failed. Please try again."

StateListener = Callable[[FormState], None]


class CredentialFormController:
    """Controller for the credential entry form"""

    def __init__(self, auth_provider: AuthProvider, navigator: Navigator):
        """
        Initialize CredentialFormController

        Args:
            auth_provider (AuthProvider): performs sign-in / sign-up
            navigator (Navigator): called after a successful sign-in
        """
        self.auth_provider = auth_provider
        self.navigator = navigator
        self.state = FormState()
        self._listeners: List[StateListener] = []

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """
        Register a listener called with the state after every change.

        Args:
            listener (StateListener): callback receiving the FormState

        Returns:
            Callable[[], None]: removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self):
        for listener in list(self._listeners):
            try:
                listener(self.state)
            except Exception as e:
                print(f"⚠️ Form state listener failed: {e}")

    def reset(self):
        """Start a fresh form session."""
        self.state = FormState()
        self._notify()

    def set_mode(self, mode: FormMode):
        self.state.mode = mode
        self.state.error = None
        self._notify()

    def toggle_mode(self):
        self.set_mode(self.state.mode.other)

    def set_email(self, value: str):
        self.state.email = value
        self._notify()

    def set_password(self, value: str):
        self.state.password = value
        self._notify()

    def toggle_reveal(self):
        self.state.reveal_password = not self.state.reveal_password
        self._notify()

    async def submit(self) -> SubmitResult:
        """
        Validate the fields and run one sign-in or sign-up attempt.

        Field edits and mode changes made while the call is pending only
        affect later submissions; the pending result is applied when it
        arrives.

        Returns:
            SubmitResult: outcome of this attempt
        """
        if self.state.busy:
            print("⚠️ Submission already in progress, ignoring submit")
            return SubmitResult.IGNORED

        error = ValidationUtils.validate_credentials(self.state.email, self.state.password)
        if error:
            self.state.error = error
            self._notify()
            return SubmitResult.INVALID

        mode = self.state.mode
        email, password = self.state.email, self.state.password
        self.state.error = None
        self.state.busy = True
        self._notify()

        try:
            if mode is FormMode.SIGN_UP:
                error = await self.auth_provider.sign_up(email, password)
            else:
                error = await self.auth_provider.sign_in(email, password)
        except Exception as e:
            print(f"⚠️ Auth provider call failed: {e}")
            error = UNEXPECTED_ERROR_MESSAGE
        finally:
            self.state.busy = False

        if error:
            self.state.error = error
            self._notify()
            return SubmitResult.REJECTED

        if mode is FormMode.SIGN_UP:
            self._notify()
            return SubmitResult.REGISTERED

        try:
            self.navigator.proceed_to_authenticated_home()
        except Exception as e:
            print(f"⚠️ Navigation after sign-in failed: {e}")
            self.state.error = UNEXPECTED_ERROR_MESSAGE
            self._notify()
            return SubmitResult.REJECTED

        self._notify()
        return SubmitResult.AUTHENTICATED
