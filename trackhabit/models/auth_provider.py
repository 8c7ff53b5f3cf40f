#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Auth Provider - identity provider contract and the local SQLite implementation
"""

import asyncio
import uuid
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from .user_model import UserModel
from ..utils.state_utils import StateUtils

INVALID_CREDENTIALS_MESSAGE = "Invalid credentials. Please check the email and password."
USER_EXISTS_MESSAGE = "A user with the same email already exists"


class AuthProvider(ABC):
    """
    Identity provider used by the credential form.

    Both calls return None on success or a user-displayable error message.
    """

    @abstractmethod
    async def sign_in(self, email: str, password: str) -> Optional[str]:
        ...

    @abstractmethod
    async def sign_up(self, email: str, password: str) -> Optional[str]:
        ...


class LocalAuthProvider(AuthProvider):
    """AuthProvider backed by UserModel"""

    def __init__(self, user_model: UserModel, app_state: Dict[str, Any]):
        """
        Initialize LocalAuthProvider

        Args:
            user_model (UserModel): user account store
            app_state (Dict[str, Any]): application state, receives the user session
        """
        self.user_model = user_model
        self.app_state = app_state

    async def sign_in(self, email: str, password: str) -> Optional[str]:
        user = await asyncio.to_thread(self.user_model.authenticate, email, password)
        if not user:
            return INVALID_CREDENTIALS_MESSAGE

        self.app_state["user_session"] = {
            "user_id": user[0],
            "name": user[1] or user[0],
            "auth": True,
            "session_key": f"sk-{uuid.uuid4().hex}"
        }
        await asyncio.to_thread(self.user_model.log_session, user[0], "login")
        return None

    async def sign_up(self, email: str, password: str) -> Optional[str]:
        nickname = email.strip().split("@", 1)[0]
        created = await asyncio.to_thread(self.user_model.register_user, email, nickname, password)
        if not created:
            return USER_EXISTS_MESSAGE

        await asyncio.to_thread(self.user_model.log_session, email, "signup")
        return None

    async def sign_out(self):
        """Log the sign-out and clear the user session."""
        user_id = self.app_state.get("user_session", {}).get("user_id")
        if user_id:
            await asyncio.to_thread(self.user_model.log_session, user_id, "logout")
        StateUtils.reset_user_session(self.app_state)
