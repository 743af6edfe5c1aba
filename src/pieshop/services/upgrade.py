"""UpgradeService: bring a shop database to the current schema head.

``apply`` runs: back up the database file, migrate, then verify every
table exists. A database that ``init_database`` built at head but never
stamped is reported as ``unstamped`` and is only stamped.
"""

from __future__ import annotations

import logging
import shutil
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from alembic import command
from alembic.config import Config
from alembic.script import ScriptDirectory
from sqlalchemy import inspect

from pieshop.infrastructure.database.migrations import build_config, current_revision
from pieshop.infrastructure.database.schema import metadata
from pieshop.services.base import BaseService
from pieshop.services.result import ServiceResult

logger = logging.getLogger(__name__)


class UpgradeService(BaseService):
    """Schema migrations for the shop database."""

    def _config(self) -> Config:
        return build_config(
            self._store.db_path,
            busy_timeout_ms=self._store.settings.store.busy_timeout_ms,
        )

    def _has_cart_table(self) -> bool:
        return "cart_lines" in inspect(self._store.engine).get_table_names()

    def _backup_db(self) -> Path:
        stamp = datetime.now(UTC).strftime("%Y%m%dT%H%M%S")
        src = self._store.db_path
        dest = src.parent / "backups" / f"pieshop-{stamp}.db"
        dest.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(src, dest)
        logger.debug("Backed up %s to %s", src, dest)
        return dest

    def check_pending(self) -> ServiceResult:
        """Report the revisions between the database and head, newest first."""
        op = "upgrade"
        try:
            script = ScriptDirectory.from_config(self._config())
            head = script.get_current_head()
            with self._store.engine.connect() as conn:
                current = current_revision(conn)
            # init_database builds the head schema directly; such files only need a stamp
            unstamped = current is None and self._has_cart_table()
            pending: list[dict[str, Any]] = []
            if head is not None and current != head and not unstamped:
                pending = [
                    {"revision": rev.revision, "description": rev.doc or ""}
                    for rev in script.iterate_revisions(head, current or "base")
                ]
        except Exception as exc:
            return ServiceResult.failure(op, "CHECK_FAILED", f"Failed to check migrations: {exc}")

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "pending_count": len(pending),
                "pending": pending,
                "current": current,
                "head": head,
                "unstamped": unstamped,
            },
        )

    def apply(self) -> ServiceResult:
        op = "upgrade"
        checked = self.check_pending()
        if not checked.ok:
            return checked

        head = checked.data["head"]
        if checked.data["unstamped"]:
            stamped = self.stamp_current()
            if not stamped.ok:
                return stamped
            return ServiceResult(
                ok=True,
                op=op,
                data={
                    "applied_count": 0,
                    "stamped": True,
                    "current": head,
                    "message": "Database was built at head; stamped without migrating",
                },
            )

        pending_count = checked.data["pending_count"]
        if not pending_count:
            return ServiceResult(
                ok=True,
                op=op,
                data={
                    "applied_count": 0,
                    "current": head,
                    "message": "Database is already up to date",
                },
            )

        try:
            backup_path = self._backup_db()
        except OSError as exc:
            return ServiceResult.failure(op, "BACKUP_FAILED", f"Backup failed: {exc}")

        try:
            command.upgrade(self._config(), "head")
        except Exception as exc:
            return ServiceResult.failure(
                op,
                "MIGRATION_FAILED",
                f"Migration failed: {exc}. Backup at: {backup_path}",
                backup_path=str(backup_path),
            )

        warnings: list[str] = []
        missing = sorted(set(metadata.tables) - set(inspect(self._store.engine).get_table_names()))
        if missing:
            warnings.append(f"Tables missing after migration: {', '.join(missing)}")

        return ServiceResult(
            ok=True,
            op=op,
            data={"applied_count": pending_count, "current": head, "backup_path": str(backup_path)},
            warnings=warnings,
        )

    def stamp_current(self) -> ServiceResult:
        """Mark a freshly built database as being at head."""
        op = "upgrade"
        cfg = self._config()
        try:
            command.stamp(cfg, "head")
            head = ScriptDirectory.from_config(cfg).get_current_head()
        except Exception as exc:
            return ServiceResult.failure(op, "STAMP_FAILED", f"Failed to stamp database: {exc}")
        return ServiceResult(ok=True, op=op, data={"stamped": True, "current": head})
