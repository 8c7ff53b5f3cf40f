"""
TrackHabit - sign-in / sign-up screen

MVC layout: models (state types, user store, auth provider), views (Gradio
components), controllers (form logic and event handlers), utils.
"""
