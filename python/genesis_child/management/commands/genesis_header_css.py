"""
Django management command: python manage.py genesis_header_css

Prints the custom header CSS the site would emit for the current
configuration. Useful for checking GENESIS_CHILD_CONFIG without rendering a
page.

Usage:
    python manage.py genesis_header_css
    python manage.py genesis_header_css --wrap  (print the <style> element)
"""

from django.apps import apps
from django.core.management.base import BaseCommand

from genesis_child.header import assemble, render_header_style


class Command(BaseCommand):
    help = "Print the custom header CSS for the current child theme configuration"

    def add_arguments(self, parser):
        parser.add_argument(
            "--wrap",
            action="store_true",
            help="Wrap the CSS in the escaped <style> element written to the page head",
        )

    def handle(self, *args, **options):
        extension = apps.get_app_config("genesis_child").extension
        settings = extension.header_settings()
        css = assemble(settings)

        if css is None:
            self.stderr.write(
                self.style.WARNING(
                    "No custom header style would be emitted "
                    "(custom header unsupported, theme callback set, or nothing customized)."
                )
            )
            return

        if options["wrap"]:
            self.stdout.write(str(render_header_style(css)), ending="")
        else:
            self.stdout.write(css)
