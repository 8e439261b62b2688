"""Terminal front-end for the wizard."""
