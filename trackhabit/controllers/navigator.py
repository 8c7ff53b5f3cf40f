#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Navigator - page transitions after authentication
"""

from abc import ABC, abstractmethod
from typing import Any, Dict

from ..utils.state_utils import AUTH_PAGE, HOME_PAGE


class Navigator(ABC):
    """Moves the user to the authenticated destination"""

    @abstractmethod
    def proceed_to_authenticated_home(self):
        ...


class PageNavigator(Navigator):
    """Navigator that flips the current page in the application state"""

    def __init__(self, app_state: Dict[str, Any]):
        self.app_state = app_state

    def proceed_to_authenticated_home(self):
        self.app_state["current_page"] = HOME_PAGE

    def return_to_auth(self):
        self.app_state["current_page"] = AUTH_PAGE
