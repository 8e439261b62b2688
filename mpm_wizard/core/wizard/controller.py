"""
WizardController — drives the state machine against a prompter.

The controller owns the loop, nothing else: it asks the question for
the current state, feeds the answer to ``advance`` and prints what
comes back, until a transition ends the run.
"""

from __future__ import annotations

import logging
from typing import Protocol

from mpm_wizard.core.cancel import CancelToken
from mpm_wizard.core.models.session import Session
from mpm_wizard.core.wizard.services import WizardServices
from mpm_wizard.core.wizard.states import Message, State
from mpm_wizard.core.wizard.steps import advance, announcement_for, question_for

logger = logging.getLogger(__name__)


class Prompter(Protocol):
    """Where questions go and answers come from."""

    def ask(self, question: str) -> str: ...

    def show(self, message: Message) -> None: ...


class WizardController:
    """Runs the wizard from platform detection to completion."""

    def __init__(
        self,
        session: Session,
        services: WizardServices,
        prompter: Prompter,
        cancel: CancelToken | None = None,
    ) -> None:
        self.session = session
        self.services = services
        self.prompter = prompter
        self.cancel = cancel
        self.state = State.PLATFORM_DETECT
        self.visited: list[State] = []

    def run(self) -> int:
        """Run every step in order.

        Returns:
            Process exit code: 0 on success or user exit, 1 on failure.

        Raises:
            WizardCancelled: If the cancel token fires between steps.
        """
        while True:
            if self.cancel is not None:
                self.cancel.raise_if_cancelled()

            self.visited.append(self.state)
            logger.debug("Entering %s", self.state.value)

            announcement = announcement_for(self.state, self.session)
            if announcement is not None:
                self.prompter.show(announcement)

            question = question_for(self.state, self.session)
            answer = self.prompter.ask(question) if question is not None else None

            transition = advance(self.state, self.session, answer, self.services)
            for message in transition.messages:
                self.prompter.show(message)

            self.state = transition.state
            if transition.finished:
                logger.info("Wizard stopped in %s (exit %d)", self.state.value, transition.exit_code)
                return transition.exit_code or 0
            if self.state is State.DONE:
                logger.info("Wizard finished")
                return 0
