"""Access to the single AppContext shared by every command in one run."""

from __future__ import annotations

import click

from stockwise.infrastructure.bootstrap import AppContext, build_context
from stockwise.infrastructure.config import ConfigurationError


def app_context() -> AppContext:
    """Return the run's AppContext, opening the store on first use.

    Built lazily so that ``--help`` works without a store credential.
    """
    root = click.get_current_context().find_root()
    if root.obj is None:
        try:
            root.obj = build_context()
        except ConfigurationError as exc:
            raise click.ClickException(str(exc))
        root.call_on_close(root.obj.close)
    return root.obj
