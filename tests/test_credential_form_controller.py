"""
Tests for CredentialFormController
"""
import asyncio

import pytest

from trackhabit.controllers.credential_form_controller import UNEXPECTED_ERROR_MESSAGE
from trackhabit.models.form_state import FormMode, SubmitResult

EMAIL = "user@example.com"
PASSWORD = "secret1"


def fill(form, email=EMAIL, password=PASSWORD, mode=FormMode.SIGN_IN):
    form.set_mode(mode)
    form.set_email(email)
    form.set_password(password)


def test_initial_state(form):
    state = form.state
    assert state.mode is FormMode.SIGN_IN
    assert state.email == "" and state.password == ""
    assert state.busy is False
    assert state.error is None
    assert state.reveal_password is False


# ---------- validation ----------

@pytest.mark.asyncio
@pytest.mark.parametrize("email,password", [("", ""), (EMAIL, ""), ("", PASSWORD)])
async def test_missing_fields(form, provider, email, password):
    fill(form, email, password)
    result = await form.submit()

    assert result is SubmitResult.INVALID
    assert form.state.error == "Email and password are required"
    assert form.state.busy is False
    assert provider.calls == []


@pytest.mark.asyncio
@pytest.mark.parametrize("email", ["notanemail", "a@b", "@b.com"])
async def test_malformed_email(form, provider, email):
    fill(form, email, "secret123")
    result = await form.submit()

    assert result is SubmitResult.INVALID
    assert form.state.error == "Please enter a valid email address"
    assert provider.calls == []


@pytest.mark.asyncio
async def test_short_password(form, provider):
    fill(form, EMAIL, "abc12")
    result = await form.submit()

    assert result is SubmitResult.INVALID
    assert form.state.error == "Password must be at least 6 characters"
    assert provider.calls == []


@pytest.mark.asyncio
async def test_fields_passed_verbatim(form, provider):
    fill(form, "  User@Example.com ", PASSWORD)
    await form.submit()
    assert provider.calls == [("sign_in", "  User@Example.com ", PASSWORD)]


# ---------- sign in ----------

@pytest.mark.asyncio
async def test_sign_in_success_navigates_once(form, provider, navigator):
    fill(form)
    result = await form.submit()

    assert result is SubmitResult.AUTHENTICATED
    assert provider.calls == [("sign_in", EMAIL, PASSWORD)]
    assert navigator.home_calls == 1
    assert form.state.error is None
    assert form.state.busy is False


@pytest.mark.asyncio
async def test_sign_in_failure_surfaces_provider_message(form, provider, navigator):
    provider.sign_in_result = "Invalid credentials"
    fill(form)
    result = await form.submit()

    assert result is SubmitResult.REJECTED
    assert form.state.error == "Invalid credentials"
    assert navigator.home_calls == 0
    assert form.state.busy is False


@pytest.mark.asyncio
async def test_previous_error_cleared_on_valid_submit(form, provider):
    fill(form, EMAIL, "abc")
    await form.submit()
    assert form.state.error is not None

    form.set_password(PASSWORD)
    seen = []
    form.subscribe(lambda state: seen.append((state.busy, state.error)))
    await form.submit()

    assert seen[0] == (True, None)
    assert form.state.error is None


# ---------- sign up ----------

@pytest.mark.asyncio
async def test_sign_up_success_stays_on_form(form, provider, navigator):
    fill(form, mode=FormMode.SIGN_UP)
    result = await form.submit()

    assert result is SubmitResult.REGISTERED
    assert provider.calls == [("sign_up", EMAIL, PASSWORD)]
    assert navigator.home_calls == 0
    assert form.state.error is None
    assert form.state.mode is FormMode.SIGN_UP


@pytest.mark.asyncio
async def test_sign_up_failure(form, provider, navigator):
    provider.sign_up_result = "A user with the same email already exists"
    fill(form, mode=FormMode.SIGN_UP)
    result = await form.submit()

    assert result is SubmitResult.REJECTED
    assert form.state.error == "A user with the same email already exists"
    assert navigator.home_calls == 0


# ---------- concurrency ----------

@pytest.mark.asyncio
async def test_submit_while_pending_is_ignored(form, provider, navigator):
    provider.gate = asyncio.Event()
    fill(form)

    first = asyncio.ensure_future(form.submit())
    await asyncio.sleep(0)
    assert form.state.busy is True

    second = await form.submit()
    assert second is SubmitResult.IGNORED
    assert len(provider.calls) == 1

    provider.gate.set()
    assert await first is SubmitResult.AUTHENTICATED
    assert navigator.home_calls == 1
    assert form.state.busy is False


@pytest.mark.asyncio
async def test_edits_while_pending_do_not_affect_inflight_call(form, provider, navigator):
    provider.gate = asyncio.Event()
    provider.sign_in_result = "Invalid credentials"
    fill(form)

    pending = asyncio.ensure_future(form.submit())
    await asyncio.sleep(0)
    form.set_email("other@example.com")
    form.set_mode(FormMode.SIGN_UP)
    provider.gate.set()
    await pending

    assert provider.calls == [("sign_in", EMAIL, PASSWORD)]
    # the late result still lands on the form
    assert form.state.error == "Invalid credentials"
    assert form.state.email == "other@example.com"
    assert form.state.mode is FormMode.SIGN_UP


@pytest.mark.asyncio
async def test_navigation_follows_mode_at_submit_time(form, provider, navigator):
    provider.gate = asyncio.Event()
    fill(form)

    pending = asyncio.ensure_future(form.submit())
    await asyncio.sleep(0)
    form.set_mode(FormMode.SIGN_UP)
    provider.gate.set()

    assert await pending is SubmitResult.AUTHENTICATED
    assert navigator.home_calls == 1


@pytest.mark.asyncio
async def test_cancelled_submit_releases_busy(form, provider):
    provider.gate = asyncio.Event()
    fill(form)

    pending = asyncio.ensure_future(form.submit())
    await asyncio.sleep(0)
    pending.cancel()
    with pytest.raises(asyncio.CancelledError):
        await pending

    assert form.state.busy is False


# ---------- errors never escape ----------

@pytest.mark.asyncio
async def test_provider_exception_becomes_error_state(form, provider, navigator):
    provider.error = ConnectionError("network down")
    fill(form)
    result = await form.submit()

    assert result is SubmitResult.REJECTED
    assert form.state.error == UNEXPECTED_ERROR_MESSAGE
    assert form.state.busy is False
    assert navigator.home_calls == 0


@pytest.mark.asyncio
async def test_navigator_exception_becomes_error_state(form, navigator, monkeypatch):
    def broken():
        raise RuntimeError("no route")

    monkeypatch.setattr(navigator, "proceed_to_authenticated_home", broken)
    fill(form)
    result = await form.submit()

    assert result is SubmitResult.REJECTED
    assert form.state.error == UNEXPECTED_ERROR_MESSAGE


# ---------- mode / fields / reveal ----------

@pytest.mark.asyncio
async def test_set_mode_clears_error_and_keeps_fields(form):
    fill(form, "notanemail", "abc")
    await form.submit()
    assert form.state.error

    form.set_mode(FormMode.SIGN_UP)
    assert form.state.error is None
    assert form.state.email == "notanemail"
    assert form.state.password == "abc"

    form.state.error = "stale"
    form.set_mode(FormMode.SIGN_UP)
    assert form.state.error is None


def test_toggle_mode_flips_and_clears_error(form):
    form.state.error = "stale"
    form.toggle_mode()
    assert form.state.mode is FormMode.SIGN_UP
    assert form.state.error is None
    form.toggle_mode()
    assert form.state.mode is FormMode.SIGN_IN


def test_field_setters_do_not_validate(form):
    form.set_email("nope")
    form.set_password("x")
    assert form.state.email == "nope"
    assert form.state.password == "x"
    assert form.state.error is None


def test_toggle_reveal(form):
    form.toggle_reveal()
    assert form.state.reveal_password is True
    form.toggle_reveal()
    assert form.state.reveal_password is False


def test_reset_restores_initial_state(form):
    fill(form, mode=FormMode.SIGN_UP)
    form.toggle_reveal()
    form.state.error = "stale"
    form.reset()

    assert form.state.mode is FormMode.SIGN_IN
    assert form.state.email == ""
    assert form.state.error is None
    assert form.state.reveal_password is False


# ---------- subscription ----------

def test_subscribe_and_unsubscribe(form):
    seen = []
    unsubscribe = form.subscribe(lambda state: seen.append(state.email))
    form.set_email("a")
    unsubscribe()
    form.set_email("b")
    assert seen == ["a"]


def test_failing_listener_does_not_break_controller(form):
    def broken(state):
        raise ValueError("render failed")

    seen = []
    form.subscribe(broken)
    form.subscribe(lambda state: seen.append(state.email))
    form.set_email("a")

    assert form.state.email == "a"
    assert seen == ["a"]
