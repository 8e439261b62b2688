"""
Static data for the wizard — release order and product tables.

Loaded once at import and never mutated:

    from mpm_wizard.core.data import catalog

    catalog.RELEASE_ORDER          # tuple[str, ...]
    catalog.ADDED_FORWARD[platform]
"""
