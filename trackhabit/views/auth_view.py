#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Auth View - sign-in / sign-up UI components
"""

import gradio as gr

from ..models.form_state import FormMode


class AuthView:
    """Builds the auth page"""

    @staticmethod
    def create_auth_page():
        """Create the sign-in / sign-up page."""
        with gr.Column(visible=True, elem_id="auth_page") as entry_page:
            gr.Markdown("# **Track**Habit")
            gr.Markdown("Build streaks, one day at a time.")
            form_title = gr.Markdown(f"### {FormMode.SIGN_IN.title}")
            mode = gr.Radio(
                choices=[m.label for m in FormMode],
                value=FormMode.SIGN_IN.label,
                show_label=False,
            )
            email = gr.Textbox(label="Email", placeholder="you@example.com", type="email")
            email_hint = gr.Markdown("Use a valid email address", visible=False)
            with gr.Row():
                pwd = gr.Textbox(label="Password", type="password", placeholder="••••••••", scale=4)
                reveal_btn = gr.Button("Show password", size="sm", scale=1)
            error_text = gr.Markdown("", visible=False, elem_id="auth_error")
            submit_btn = gr.Button("Sign In", variant="primary")
            switch_btn = gr.Button("New here? Sign Up", variant="secondary")
            entry_status = gr.Markdown("", visible=False)

        return {
            'entry_page': entry_page,
            'form_title': form_title,
            'mode': mode,
            'email': email,
            'email_hint': email_hint,
            'pwd': pwd,
            'reveal_btn': reveal_btn,
            'error_text': error_text,
            'submit_btn': submit_btn,
            'switch_btn': switch_btn,
            'entry_status': entry_status
        }
