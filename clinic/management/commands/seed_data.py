# clinic/management/commands/seed_data.py
from django.core.management.base import BaseCommand
from django.db import DEFAULT_DB_ALIAS

from clinic.services.bootstrap import seed_initial_data


class Command(BaseCommand):
    help = "Seed the doctor roster and the default admin account (idempotent)."

    def add_arguments(self, parser):
        parser.add_argument("--database", default=DEFAULT_DB_ALIAS, help="Database alias to seed.")

    def handle(self, *args, **opts):
        created = seed_initial_data(using=opts["database"])
        self.stdout.write(self.style.SUCCESS(
            f"ok: {created['doctors']} doctors, {created['admins']} admin created"
        ))
