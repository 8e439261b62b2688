"""
Services — the I/O boundary of the wizard.

Each module wraps one external collaborator (platform probes, HTTP,
subprocess, filesystem) behind plain functions that raise
``WizardError`` subclasses on failure.
"""
