#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Home View - page shown after sign-in
"""

import gradio as gr


class HomeView:
    """Builds the authenticated home page"""

    @staticmethod
    def create_home_page():
        """Create the home page (hidden until sign-in)."""
        with gr.Column(visible=False, elem_id="home_page") as main_page:
            with gr.Row(elem_id="welcome_logout_row"):
                with gr.Column(scale=4):
                    welcome = gr.Markdown("", elem_id="welcome_message_area")
                with gr.Column(scale=1):
                    logout_btn = gr.Button("Sign Out", size="sm", elem_id="logout_button")
            gr.Markdown("Your habits will show up here.")

        return {
            'main_page': main_page,
            'welcome': welcome,
            'logout_btn': logout_btn
        }
