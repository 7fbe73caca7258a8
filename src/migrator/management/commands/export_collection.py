# migrator/management/commands/export_collection.py
"""
Dump a document store collection to a flat file.

Usage:
    python manage.py export_collection users --output-dir ./export
    python manage.py export_collection assignments --format csv
"""

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from migrator.exceptions import MigrationError
from migrator.providers.factory import ProviderFactory
from migrator.services.export_service import EXPORT_FORMATS, CollectionExporter
from migratorutils.log_helpers import log_command
from migratorutils.logging import bind_run_context

COMMAND_NAME = "export_collection"


class Command(BaseCommand):
    help = "Exports a document store collection to JSON or CSV"

    def add_arguments(self, parser):
        parser.add_argument("collection", help="Collection name")
        parser.add_argument("--format", choices=EXPORT_FORMATS, default="json")
        parser.add_argument(
            "--output-dir",
            default=None,
            help="Destination directory (default: EXPORT_OUTPUT_DIR)",
        )

    def handle(self, *args, **options):
        collection = options["collection"]
        output_dir = options["output_dir"] or settings.EXPORT_OUTPUT_DIR
        bind_run_context(COMMAND_NAME, collection=collection)

        try:
            store = ProviderFactory.create_document_store()
            path = CollectionExporter(store, output_dir).export(
                collection, options["format"]
            )
        except MigrationError as e:
            log_command(COMMAND_NAME, status="failure", error=e)
            raise CommandError(str(e)) from e

        log_command(COMMAND_NAME, status="success", path=str(path))
        self.stdout.write(self.style.SUCCESS(f"Exported {collection} to {path}"))
