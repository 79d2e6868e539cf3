import json

from django.core.management.base import BaseCommand, CommandError

from ...config_proxy import get_setting
from ...diff import DiffOptions, build_report
from ._schema_sources import load_path, load_receiver, write_output


class Command(BaseCommand):
    help = "Report differences between two GraphQL schemas (SDL or JSON introspection files)."

    def add_arguments(self, parser):
        parser.add_argument(
            "other",
            help="Schema file compared against the receiver.",
        )
        parser.add_argument(
            "--this",
            dest="this_file",
            help="Receiver schema file (default: the project's GRAPHENE.SCHEMA).",
        )
        parser.add_argument(
            "--format",
            choices=["text", "json", "markdown"],
            help="Output format (default: report_settings.default_format).",
        )
        parser.add_argument(
            "--out",
            dest="output_file",
            help="Output file path (default: stdout).",
        )
        parser.add_argument(
            "--label-this",
            help="Label used for the receiver in descriptions.",
        )
        parser.add_argument(
            "--label-other",
            help="Label used for the other schema in descriptions.",
        )
        parser.add_argument(
            "--fail-on-breaking",
            action="store_true",
            help="Exit with an error when breaking changes are found.",
        )

    def handle(self, *args, **options):
        this = load_receiver(options["this_file"])
        other = load_path(options["other"])

        report = build_report(
            this,
            other,
            DiffOptions(
                label_for_this=options["label_this"],
                label_for_other=options["label_other"],
            ),
        )

        output_format = options["format"] or get_setting("report_settings.default_format", "text")
        if output_format == "json":
            indent = get_setting("report_settings.json_indent", 2)
            output = json.dumps(report.to_dict(), indent=indent)
        elif output_format == "markdown":
            output = report.to_markdown()
        else:
            output = report.to_text()
        write_output(self, output, options["output_file"])

        fail_on_breaking = options["fail_on_breaking"] or get_setting(
            "report_settings.fail_on_breaking", False
        )
        if fail_on_breaking and not report.is_backward_compatible:
            raise CommandError(
                f"{len(report.breaking_changes)} breaking changes found."
            )
