# migrator/management/commands/check_duplicate_emails.py
from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from migrator.exceptions import MigrationError
from migrator.services.duplicate_check import find_duplicate_emails
from migrator.sources import JsonDirectoryDataSource, load_users
from migratorutils.log_helpers import log_command
from migratorutils.logging import bind_run_context

COMMAND_NAME = "check_duplicate_emails"


class Command(BaseCommand):
    help = "Lists legacy user emails shared by more than one user (case-insensitive)"

    def add_arguments(self, parser):
        parser.add_argument(
            "--data-dir",
            default=None,
            help="Directory holding users.json (default: LEGACY_DATA_DIR)",
        )

    def handle(self, *args, **options):
        data_dir = options["data_dir"] or settings.LEGACY_DATA_DIR
        bind_run_context(COMMAND_NAME, data_dir=str(data_dir))

        try:
            users = load_users(JsonDirectoryDataSource(data_dir))
        except MigrationError as e:
            log_command(COMMAND_NAME, status="failure", error=e)
            raise CommandError(str(e)) from e

        duplicates = find_duplicate_emails(users)
        log_command(
            COMMAND_NAME,
            status="success",
            users=len(users),
            duplicates=len(duplicates),
        )

        if not duplicates:
            self.stdout.write(self.style.SUCCESS("No duplicate emails found"))
            return

        for email, count in duplicates.items():
            self.stdout.write(f"{email}: {count} users")
        self.stdout.write(
            self.style.WARNING(f"{len(duplicates)} duplicate email(s) found")
        )
