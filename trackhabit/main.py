#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
TrackHabit application main file (MVC layout)

Builds the Gradio UI for the sign-in / sign-up screen and launches it.
"""

import gradio as gr
from typing import Dict, Any

# Config and Utils
from .config import config
from .utils import NetworkUtils, StateUtils

# Models
from .models import UserModel, LocalAuthProvider

# Views
from .views import AuthView, HomeView

# Controllers
from .controllers import AuthController, CredentialFormController, PageNavigator


class TrackHabitApp:
    """TrackHabit application"""

    def __init__(self):
        """Wire models and controllers."""
        self.app_state = StateUtils.init_app_state()

        # Models
        self.user_model = UserModel(config.db_path)
        self.auth_provider = LocalAuthProvider(self.user_model, self.app_state)

        # Controllers
        self.navigator = PageNavigator(self.app_state)
        self.form_controller = CredentialFormController(self.auth_provider, self.navigator)
        self.auth_controller = AuthController(
            self.form_controller, self.auth_provider, self.navigator, self.app_state
        )

    def build_gradio_app(self) -> gr.Blocks:
        """Build the Gradio app."""
        custom_css = """
        #auth_page {
            max-width: 480px !important;
            margin: 0 auto !important;
        }

        #auth_error {
            color: #d32f2f !important;
        }
        """

        with gr.Blocks(title=config.app_title, css=custom_css) as demo:
            auth_components = AuthView.create_auth_page()
            home_components = HomeView.create_home_page()

            self._bind_events({
                **auth_components,
                **home_components
            })

        return demo

    def _bind_events(self, components: Dict[str, Any]):
        """Attach event handlers."""
        form_outputs = [
            components['form_title'], components['mode'], components['submit_btn'],
            components['switch_btn'], components['error_text']
        ]
        page_outputs = [
            components['entry_page'], components['main_page'],
            components['welcome'], components['entry_status']
        ]

        components['mode'].input(
            self.auth_controller.change_mode,
            [components['mode']],
            form_outputs
        )
        components['switch_btn'].click(
            self.auth_controller.toggle_mode,
            None,
            form_outputs
        )

        components['email'].change(
            self.auth_controller.change_email,
            [components['email']],
            [components['email_hint']]
        )
        components['pwd'].change(
            self.auth_controller.change_password,
            [components['pwd']],
            None
        )
        components['reveal_btn'].click(
            self.auth_controller.toggle_reveal,
            None,
            [components['pwd'], components['reveal_btn']]
        )

        # Submit
        submit_inputs = [components['email'], components['pwd']]
        components['pwd'].submit(
            self.auth_controller.submit,
            submit_inputs,
            page_outputs + form_outputs
        )
        components['submit_btn'].click(
            self.auth_controller.submit,
            submit_inputs,
            page_outputs + form_outputs
        )

        components['logout_btn'].click(
            self.auth_controller.sign_out,
            None,
            page_outputs + form_outputs + [components['email'], components['pwd'], components['reveal_btn']]
        )

    def run(self):
        """Launch the application."""
        print("Starting TrackHabit...")

        print("Building Gradio UI...")
        demo = self.build_gradio_app()

        port = NetworkUtils.find_free_port(config.port_range) or config.port_range[0]

        print(f"Starting the application on port {port}...")
        print(f"Open http://localhost:{port} in your browser.")

        demo.queue().launch(
            server_name="0.0.0.0",
            server_port=port,
            show_error=True,
            share=False
        )


def main():
    """Entry point"""
    app = TrackHabitApp()
    app.run()


if __name__ == "__main__":
    main()
