# migrator/management/commands/migrate_legacy_data.py
"""
Run the full legacy migration.

Usage:
    python manage.py migrate_legacy_data --data-dir ./export
    python manage.py migrate_legacy_data --limit 5 --check-duplicates
"""

import time

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.core.management.base import BaseCommand, CommandError

from migrator.exceptions import MigrationError
from migrator.providers.factory import build_migration_context
from migrator.services.duplicate_check import find_duplicate_emails
from migrator.services.migration_service import MigrationService
from migrator.sources import JsonDirectoryDataSource, load_users
from migratorutils.log_helpers import log_command, log_exception
from migratorutils.logging import bind_run_context

COMMAND_NAME = "migrate_legacy_data"


class Command(BaseCommand):
    help = (
        "Migrates legacy users, assignments, reloads and subscriptions into "
        "the identity provider, the document store and the billing provider"
    )

    def add_arguments(self, parser):
        parser.add_argument(
            "--data-dir",
            default=None,
            help="Directory holding the legacy JSON files (default: LEGACY_DATA_DIR)",
        )
        parser.add_argument(
            "--limit",
            type=int,
            default=None,
            help="Only migrate the first N legacy users",
        )
        parser.add_argument(
            "--check-duplicates",
            action="store_true",
            help="Abort before writing anything if legacy emails are duplicated",
        )

    def handle(self, *args, **options):
        data_dir = options["data_dir"] or settings.LEGACY_DATA_DIR
        limit = options["limit"]
        if limit is not None and limit < 0:
            raise CommandError("--limit must not be negative")

        bind_run_context(COMMAND_NAME, data_dir=str(data_dir))
        log_command(COMMAND_NAME, status="started", limit=limit)
        started = time.monotonic()

        source = JsonDirectoryDataSource(data_dir)
        try:
            if options["check_duplicates"]:
                self._check_duplicates(source)

            service = MigrationService(build_migration_context())
            report = service.run(source, user_limit=limit)
        except (MigrationError, ImproperlyConfigured) as e:
            context = e.to_dict() if isinstance(e, MigrationError) else None
            log_exception(e, context=context, logger_name=__name__)
            log_command(
                COMMAND_NAME,
                status="failure",
                error=e,
                duration=time.monotonic() - started,
            )
            raise CommandError(str(e)) from e

        log_command(
            COMMAND_NAME,
            status="success",
            duration=time.monotonic() - started,
            users=report.users,
            accounts=report.accounts,
            assignments=report.assignments,
            subscriptions=report.subscriptions,
        )
        self.stdout.write(self.style.SUCCESS("complete"))

    def _check_duplicates(self, source):
        duplicates = find_duplicate_emails(load_users(source))
        if not duplicates:
            return

        for email, count in duplicates.items():
            self.stderr.write(f"{email}: {count} users")
        raise MigrationError(
            message=f"{len(duplicates)} duplicate email(s) in legacy users",
            code="DUPLICATE_EMAILS",
            details={"emails": sorted(duplicates)},
        )
