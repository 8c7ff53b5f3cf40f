"""
Pytest fixtures shared by the TrackHabit tests
"""
import asyncio
from typing import List, Optional, Tuple

import pytest

from trackhabit.controllers.credential_form_controller import CredentialFormController
from trackhabit.controllers.navigator import Navigator
from trackhabit.models.auth_provider import AuthProvider, LocalAuthProvider
from trackhabit.models.user_model import UserModel
from trackhabit.utils.state_utils import StateUtils


# ---------- fakes ----------

class FakeAuthProvider(AuthProvider):
    """Records calls and returns canned results instead of checking credentials."""

    def __init__(self, sign_in_result: Optional[str] = None, sign_up_result: Optional[str] = None):
        self.sign_in_result = sign_in_result
        self.sign_up_result = sign_up_result
        self.calls: List[Tuple[str, str, str]] = []
        self.gate: Optional[asyncio.Event] = None
        self.error: Optional[Exception] = None

    async def _respond(self, name: str, email: str, password: str, result: Optional[str]):
        self.calls.append((name, email, password))
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return result

    async def sign_in(self, email, password):
        return await self._respond("sign_in", email, password, self.sign_in_result)

    async def sign_up(self, email, password):
        return await self._respond("sign_up", email, password, self.sign_up_result)


class FakeNavigator(Navigator):
    def __init__(self):
        self.home_calls = 0

    def proceed_to_authenticated_home(self):
        self.home_calls += 1


# ---------- fixtures ----------

@pytest.fixture
def provider():
    return FakeAuthProvider()


@pytest.fixture
def navigator():
    return FakeNavigator()


@pytest.fixture
def form(provider, navigator):
    return CredentialFormController(provider, navigator)


@pytest.fixture
def user_model(tmp_path):
    return UserModel(str(tmp_path / "users.db"))


@pytest.fixture
def app_state():
    return StateUtils.init_app_state()


@pytest.fixture
def local_provider(user_model, app_state):
    return LocalAuthProvider(user_model, app_state)
