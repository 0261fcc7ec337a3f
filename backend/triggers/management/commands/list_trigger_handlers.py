"""Management command to list registered trigger handlers."""

from __future__ import annotations

from django.core.management.base import BaseCommand

from triggers.registry import evaluate_registration_enabled, get_registrations


class Command(BaseCommand):
    """List all registered trigger handlers."""

    help = "List all registered trigger handlers"

    def add_arguments(self, parser) -> None:
        parser.add_argument(
            "--model",
            type=str,
            default=None,
            help="Only show handlers for this model (app_label.model_name)",
        )

    def handle(self, *args, **options) -> None:
        model = (options.get("model") or "").lower()
        registrations = {
            name: reg
            for name, reg in get_registrations().items()
            if not model or reg.model_label == model
        }

        if not registrations:
            self.stdout.write(self.style.WARNING("No trigger handlers registered."))
            return

        self.stdout.write(self.style.SUCCESS(f"Registered trigger handlers ({len(registrations)}):"))
        self.stdout.write("")

        for name, registration in sorted(registrations.items()):
            enabled, reason = evaluate_registration_enabled(registration)
            if enabled:
                status = self.style.SUCCESS("enabled")
            else:
                status = self.style.ERROR(f"disabled ({reason})")
            handler_class = registration.handler_class

            self.stdout.write(f"  {name}")
            self.stdout.write(f"    Model:   {registration.model_label}")
            self.stdout.write(f"    Status:  {status}")
            if registration.description:
                self.stdout.write(f"    About:   {registration.description}")
            self.stdout.write(f"    Handler: {handler_class.__module__}.{handler_class.__qualname__}")
            self.stdout.write("")
