#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
State Utils - application state helpers
"""

from typing import Dict, Any

AUTH_PAGE = "auth"
HOME_PAGE = "home"


class StateUtils:
    """Helpers for the shared application state dictionary"""

    @staticmethod
    def empty_user_session() -> Dict[str, Any]:
        return {
            "user_id": None,
            "name": None,
            "auth": False,
            "session_key": None
        }

    @staticmethod
    def init_app_state() -> Dict[str, Any]:
        """Create the initial application state."""
        return {
            "user_session": StateUtils.empty_user_session(),
            "current_page": AUTH_PAGE,
        }

    @staticmethod
    def reset_user_session(app_state: Dict[str, Any]):
        """Forget the signed-in user."""
        app_state["user_session"] = StateUtils.empty_user_session()

    @staticmethod
    def is_authenticated(app_state: Dict[str, Any]) -> bool:
        """Whether a user is signed in."""
        return app_state.get("user_session", {}).get("auth", False)

    @staticmethod
    def on_home_page(app_state: Dict[str, Any]) -> bool:
        """Whether the navigator has moved past the auth page."""
        return app_state.get("current_page") == HOME_PAGE
