"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. One CLI invocation is one request: the context owns
the request's Store and visitor session, resolves the cart id at most once,
and routes results to stdout/stderr with the right exit code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pieshop.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from pieshop.config.settings import PieSettings
    from pieshop.infrastructure.session import FileSessionStore
    from pieshop.infrastructure.store import Store
    from pieshop.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The store and session are created lazily so ``--help``, ``--version``
    and ``--examples`` never touch the database or the session directory.
    """

    def __init__(self, settings: PieSettings) -> None:
        self.settings = settings
        self._store: Store | None = None
        self._session: FileSessionStore | None = None
        self._cart_id: str | None = None

        from pieshop.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            log_json=settings.log_json,
            context={"session": settings.active_session},
        )

        if settings.verbose:
            from pieshop.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def store(self) -> Store:
        """The record store (created lazily on first access)."""
        if self._store is None:
            from pieshop.infrastructure.store import Store

            self._store = Store(self.settings)
            self._store.init_event_bus()
        return self._store

    @property
    def session(self) -> FileSessionStore:
        """The visitor session named by ``--session`` or ``[session] name``."""
        if self._session is None:
            from pieshop.infrastructure.session import open_session

            try:
                self._session = open_session(self.settings.shop_root, self.settings.active_session)
            except ValueError as exc:
                raise click.BadParameter(str(exc), param_hint="'--session'") from exc
        return self._session

    def cart_id(self) -> str:
        """The cart id for this request, minted into the session if absent."""
        if self._cart_id is None:
            from pieshop.services.identity import resolve_cart_id

            self._cart_id = resolve_cart_id(self.session, key=self.settings.session.cookie_key)
        return self._cart_id

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

    def close(self) -> None:
        """Dispose of the store's engine, if one was opened."""
        if self._store is not None:
            self._store.close()
            self._store = None
