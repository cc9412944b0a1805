"""
Management command to check materials in the database.
"""
from django.core.management.base import BaseCommand

from catalog.models import Lecturer, Material


class Command(BaseCommand):
    help = 'Report materials missing their content URL or pointing at deleted lecturers'

    def handle(self, *args, **options):
        materials = list(Material.objects.all())
        total = len(materials)
        self.stdout.write(f"Total materials in database: {total}")
        self.stdout.write("-" * 80)

        if total == 0:
            self.stdout.write(self.style.WARNING("No materials found in database!"))
            return

        known_lecturers = set(Lecturer.objects.values_list('id', flat=True))
        missing_url = 0
        dangling = 0
        for m in materials:
            if not m.content_url:
                missing_url += 1
                self.stdout.write(self.style.ERROR(f"✗ ID {m.id}: {m.title} ({m.kind}, NO URL)"))
            if m.lecturer_id is not None and m.lecturer_id not in known_lecturers:
                dangling += 1
                self.stdout.write(self.style.WARNING(
                    f"? ID {m.id}: {m.title} references deleted lecturer {m.lecturer_id}"
                ))

        self.stdout.write("-" * 80)
        self.stdout.write(
            f"Summary: {total - missing_url} with URL, {missing_url} without URL, "
            f"{dangling} with a deleted lecturer"
        )
        if missing_url == 0 and dangling == 0:
            self.stdout.write(self.style.SUCCESS("All materials look healthy."))
