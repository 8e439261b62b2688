"""
Installation wizard — state machine, transition function and driver.

    from mpm_wizard.core.wizard import WizardController, WizardServices

    controller = WizardController(Session(), WizardServices.default(), prompter)
    exit_code = controller.run()
"""

from mpm_wizard.core.wizard.controller import Prompter, WizardController
from mpm_wizard.core.wizard.services import WizardServices
from mpm_wizard.core.wizard.states import Message, State, Transition
from mpm_wizard.core.wizard.steps import advance, announcement_for, question_for

__all__ = [
    "Message",
    "Prompter",
    "State",
    "Transition",
    "WizardController",
    "WizardServices",
    "advance",
    "announcement_for",
    "question_for",
]
