import json

from django.core.management.base import BaseCommand, CommandError

from ...config_proxy import get_setting
from ...exceptions import IncompatibleKindMerge, SchemaLoadError
from ...graph import print_graph
from ...merge import merge_schema
from ._schema_sources import load_path, load_receiver, write_output


class Command(BaseCommand):
    help = "Merge a GraphQL schema file into the receiver schema and print the result as SDL or JSON."

    def add_arguments(self, parser):
        parser.add_argument(
            "other",
            help="Schema file merged into the receiver; its definitions win on conflicts.",
        )
        parser.add_argument(
            "--this",
            dest="this_file",
            help="Receiver schema file (default: the project's GRAPHENE.SCHEMA).",
        )
        parser.add_argument(
            "--out",
            dest="output_file",
            help="Output file path (default: stdout).",
        )
        parser.add_argument(
            "--json",
            action="store_true",
            help="Output the merged graph as JSON instead of SDL.",
        )

    def handle(self, *args, **options):
        this = load_receiver(options["this_file"])
        other = load_path(options["other"])

        try:
            merged = merge_schema(this, other)
            if options["json"]:
                indent = get_setting("report_settings.json_indent", 2)
                output = json.dumps(merged.to_dict(), indent=indent)
            else:
                output = print_graph(merged)
        except (IncompatibleKindMerge, SchemaLoadError) as e:
            raise CommandError(str(e)) from e

        write_output(self, output, options["output_file"])
