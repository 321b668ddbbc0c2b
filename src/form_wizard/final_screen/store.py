"""FinalScreenStore: owns the review screen's state and runs its effects.

Views call ``send`` with actions and re-render from ``state`` whenever a
subscribed listener fires. Submission effects run as asyncio tasks on the loop
that owns the store; their results come back through ``send`` as
ReceiveSubmitResult actions.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from form_wizard.final_screen.environment import FinalScreenEnvironment
from form_wizard.final_screen.reducer import (
    Effect,
    NavigateEffect,
    NavigationSignal,
    SubmitEffect,
    reduce,
)
from form_wizard.models.actions import Action, ReceiveSubmitResult
from form_wizard.models.answers import FormAnswers, SubmissionPayload, SubmissionResult
from form_wizard.models.state import ScreenState

logger = logging.getLogger(__name__)

StateListener = Callable[[ScreenState], None]
Navigator = Callable[[NavigationSignal], None]


class FinalScreenStore:
    """Single-owner controller for one visit to the review screen."""

    def __init__(
        self,
        initial_state: ScreenState | FormAnswers,
        environment: FinalScreenEnvironment,
        navigator: Navigator | None = None,
    ) -> None:
        if isinstance(initial_state, FormAnswers):
            initial_state = ScreenState.from_answers(initial_state)
        self._state = initial_state
        self.environment = environment
        self.navigator = navigator
        self._listeners: list[StateListener] = []
        self._tasks: set[asyncio.Task] = set()
        self._closed = False

    @property
    def state(self) -> ScreenState:
        return self._state

    @property
    def closed(self) -> bool:
        return self._closed

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a listener called after every state change. Returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def send(self, action: Action) -> None:
        """Apply ``action`` synchronously and start any resulting effects."""
        if self._closed:
            logger.debug("Dropping %s: store is closed", type(action).__name__)
            return

        new_state, effects = reduce(self._state, action)
        loop = None
        if any(isinstance(effect, SubmitEffect) for effect in effects):
            # Raises outside a running loop, before the in-flight state is committed
            loop = asyncio.get_running_loop()

        if new_state is not self._state:
            self._state = new_state
            for listener in list(self._listeners):
                listener(new_state)

        for effect in effects:
            self._run_effect(effect, loop)

    def _run_effect(self, effect: Effect, loop: asyncio.AbstractEventLoop | None) -> None:
        if isinstance(effect, NavigateEffect):
            logger.debug("Navigation signal: %s", effect.signal)
            if self.navigator is not None:
                self.navigator(effect.signal)
        elif isinstance(effect, SubmitEffect) and loop is not None:
            task = loop.create_task(self._submit(effect.payload))
            self._tasks.add(task)
            task.add_done_callback(self._tasks.discard)

    async def _submit(self, payload: SubmissionPayload) -> None:
        env = self.environment
        try:
            accepted = await env.submit(payload)
        except Exception as e:
            logger.exception("Submission failed for %s %s", payload.first_name, payload.last_name)
            result = SubmissionResult.failed(str(e) or type(e).__name__)
        else:
            if accepted:
                result = SubmissionResult.succeeded()
            else:
                result = SubmissionResult.failed("Submission was rejected")

        await env.scheduler.sleep(env.response_delay)
        await env.scheduler.run_on_main(self.send, ReceiveSubmitResult(result=result))

    async def wait_idle(self) -> None:
        """Wait until every outstanding effect has delivered its result."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def close(self) -> None:
        """Tear the store down. Outstanding submissions are cancelled and late results dropped."""
        if self._closed:
            return
        self._closed = True
        self._listeners.clear()
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        logger.debug("Store closed, cancelled %d effect(s)", len(tasks))
        if self.environment.close is not None:
            await self.environment.close()
