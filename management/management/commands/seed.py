"""
Global seed command that discovers and executes seeders.py in each app

Seeders run in ascending PRIORITY so zones exist before customers and
customers before orders.

Usage:
    python manage.py seed
    python manage.py seed --app catalog --app zones
"""

import importlib
import logging

from django.apps import apps
from django.core.management.base import BaseCommand, CommandError

logger = logging.getLogger(__name__)

DEFAULT_PRIORITY = 100


class Command(BaseCommand):
    help = "Seed database by running seeders.py in each installed app"

    def add_arguments(self, parser):
        parser.add_argument(
            "--app",
            action="append",
            dest="apps",
            default=[],
            help="Only run the seeder of this app (can be repeated)",
        )

    def _discover(self, only):
        seeders = []
        for app_config in apps.get_app_configs():
            # Skip built-in Django apps and third-party packages
            if app_config.name.startswith("django.") or app_config.name == "rest_framework":
                continue
            if only and app_config.label not in only:
                continue
            try:
                module = importlib.import_module(f"{app_config.name}.seeders")
            except ModuleNotFoundError as e:
                if e.name != f"{app_config.name}.seeders":
                    raise
                continue
            if hasattr(module, "seed"):
                seeders.append((getattr(module, "PRIORITY", DEFAULT_PRIORITY), app_config.label, module))
        return sorted(seeders, key=lambda entry: (entry[0], entry[1]))

    def handle(self, *args, **options):
        only = set(options["apps"])
        unknown = only - {app_config.label for app_config in apps.get_app_configs()}
        if unknown:
            raise CommandError(f"Unknown app(s): {', '.join(sorted(unknown))}")

        self.stdout.write("=" * 60)
        self.stdout.write(self.style.SUCCESS("Starting database seeding..."))
        self.stdout.write("=" * 60)

        seeded_apps = []
        failed_apps = []

        for _, label, module in self._discover(only):
            self.stdout.write(f"\nSeeding {label}...")
            try:
                module.seed()
            except Exception as e:
                logger.exception("Seeder for %s failed", label)
                failed_apps.append((label, str(e)))
                self.stdout.write(self.style.ERROR(f"✗ Failed to seed {label}: {e}"))
                continue
            seeded_apps.append(label)
            self.stdout.write(self.style.SUCCESS(f"✓ {label} seeded successfully"))

        # Summary
        self.stdout.write("\n" + "=" * 60)
        if seeded_apps:
            self.stdout.write(self.style.SUCCESS(f"✓ Successfully seeded {len(seeded_apps)} app(s):"))
            for app in seeded_apps:
                self.stdout.write(f"  - {app}")

        if not seeded_apps and not failed_apps:
            self.stdout.write(self.style.WARNING("No seeders found in any app"))

        self.stdout.write("=" * 60)

        if failed_apps:
            raise CommandError(
                f"Failed to seed {len(failed_apps)} app(s): "
                + ", ".join(f"{app} ({error})" for app, error in failed_apps)
            )
