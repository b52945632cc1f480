from django.core.management.base import BaseCommand, CommandError
from django.db.utils import OperationalError

from practice.db import check_database_connection


class Command(BaseCommand):
    help = "Verify that the configured database accepts connections."

    def add_arguments(self, parser):
        parser.add_argument('--database', default='default')

    def handle(self, *args, **opts):
        alias = opts['database']
        try:
            check_database_connection(alias)
        except OperationalError as e:
            raise CommandError(f"Unable to connect to database {alias!r}: {e}")
        self.stdout.write(self.style.SUCCESS(f"ok: database {alias!r} connected"))
