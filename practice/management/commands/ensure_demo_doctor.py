from django.core.management.base import BaseCommand

from practice.models import Doctor
from practice.services.auth import hash_password

DEMO_EMAIL = "demo.doctor@medtrack.local"
DEMO_PASSWORD = "demo123"


class Command(BaseCommand):
    help = "Ensure a demo doctor exists with password=demo123 (idempotent)."

    def add_arguments(self, parser):
        parser.add_argument('--email', default=DEMO_EMAIL)
        parser.add_argument('--password', default=DEMO_PASSWORD)

    def handle(self, *args, **opts):
        doctor, created = Doctor.objects.get_or_create(
            email=opts['email'],
            defaults={"fullname": "Demo Doctor", "password": hash_password(opts['password'])},
        )
        if not created:
            # Reset the password so the documented credentials always work
            doctor.password = hash_password(opts['password'])
            doctor.save(update_fields=["password", "updated_at"])
        self.stdout.write(self.style.SUCCESS(f"ok: {doctor.email} (id={doctor.id})"))
