#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Auth Controller - Gradio event handlers for the sign-in / sign-up page
"""

import asyncio
import gradio as gr
from typing import Any, AsyncIterator, Dict, Tuple

from .credential_form_controller import CredentialFormController
from .navigator import PageNavigator
from ..models.auth_provider import LocalAuthProvider
from ..models.form_state import FormMode, SubmitResult
from ..utils.state_utils import StateUtils

REGISTERED_NOTICE = "Account created. You can sign in now."
SIGNED_OUT_NOTICE = "You have been signed out."


class AuthController:
    """Connects the auth page components to CredentialFormController"""

    def __init__(self, form: CredentialFormController, auth_provider: LocalAuthProvider,
                 navigator: PageNavigator, app_state: Dict[str, Any]):
        """
        Initialize AuthController

        Args:
            form (CredentialFormController): form logic
            auth_provider (LocalAuthProvider): used for sign-out
            navigator (PageNavigator): page switching
            app_state (Dict[str, Any]): application state
        """
        self.form = form
        self.auth_provider = auth_provider
        self.navigator = navigator
        self.app_state = app_state

    # Rendering

    def render_form(self) -> Tuple:
        """
        Updates for the form widgets.

        Returns:
            Tuple: (title, mode radio, submit button, switch-mode button, error text)
        """
        state = self.form.state
        if state.mode is FormMode.SIGN_UP:
            submit_label, switch_label = "Create Account", "Already have an account? Sign In"
        else:
            submit_label, switch_label = "Sign In", "New here? Sign Up"
        if state.busy:
            submit_label = "Please wait..."

        return (
            gr.update(value=f"### {state.mode.title}"),
            gr.update(value=state.mode.label),
            gr.update(value=submit_label, interactive=not state.busy),
            gr.update(value=switch_label),
            gr.update(value=f"⚠️ {state.error}" if state.error else "", visible=bool(state.error)),
        )

    def render_pages(self, notice: str = "") -> Tuple:
        """
        Updates for the page containers.

        Returns:
            Tuple: (auth page, home page, welcome text, notice text)
        """
        on_home = StateUtils.on_home_page(self.app_state)
        name = self.app_state["user_session"].get("name") or ""
        return (
            gr.update(visible=not on_home),
            gr.update(visible=on_home),
            gr.update(value=f"### Welcome, {name}!" if on_home else ""),
            gr.update(value=notice, visible=bool(notice)),
        )

    # Event handlers

    def change_mode(self, label: str) -> Tuple:
        self.form.set_mode(FormMode.from_label(label))
        return self.render_form()

    def toggle_mode(self) -> Tuple:
        self.form.toggle_mode()
        return self.render_form()

    def change_email(self, value: str):
        """Store the email; shows the hint while the field is filled and error-free."""
        self.form.set_email(value or "")
        return gr.update(visible=bool(value) and not self.form.state.error)

    def change_password(self, value: str):
        self.form.set_password(value or "")

    def toggle_reveal(self) -> Tuple:
        self.form.toggle_reveal()
        reveal = self.form.state.reveal_password
        return (
            gr.update(type="text" if reveal else "password"),
            gr.update(value="Hide password" if reveal else "Show password"),
        )

    async def submit(self, email: str, password: str) -> AsyncIterator[Tuple]:
        """
        Submit the form.

        Yields the busy rendering first and the final rendering once the
        provider call has settled.

        Args:
            email (str): email field value
            password (str): password field value

        Yields:
            Tuple: render_pages() + render_form() updates
        """
        self.form.set_email(email or "")
        self.form.set_password(password or "")

        task = asyncio.ensure_future(self.form.submit())
        await asyncio.sleep(0)
        yield self.render_pages() + self.render_form()

        result = await task
        notice = ""
        if result is SubmitResult.REGISTERED:
            self.form.set_mode(FormMode.SIGN_IN)
            notice = REGISTERED_NOTICE
        yield self.render_pages(notice) + self.render_form()

    async def sign_out(self) -> Tuple:
        """
        Sign out and return to an empty auth page.

        Returns:
            Tuple: render_pages() + render_form() + (email field, password field, reveal button)
        """
        await self.auth_provider.sign_out()
        self.navigator.return_to_auth()
        self.form.reset()
        return (
            self.render_pages(SIGNED_OUT_NOTICE)
            + self.render_form()
            + (gr.update(value=""), gr.update(value="", type="password"), gr.update(value="Show password"))
        )
