from django.core.management.base import BaseCommand, CommandError

from linetree import explorer, huffman
from linetree.exceptions import CodecError
from linetree.views import build_share_url


class Command(BaseCommand):
    help = "Validate a lines document and print its share link"  # noqa: A003

    def add_arguments(self, parser):
        parser.add_argument(
            "file_path", nargs="?", help="YAML lines document to share"
        )
        parser.add_argument(
            "-d",
            "--decode",
            help="Print the lines document held by a share token instead.",
        )

    def handle(self, *args, **options):
        if token := options.get("decode"):
            try:
                self.stdout.write(huffman.decompress(token))
            except CodecError as e:
                raise CommandError(str(e))
            return

        file_path = options.get("file_path")
        if not file_path:
            raise CommandError("Give a file to share or --decode a token")

        try:
            with open(file_path, "r") as file:
                text = file.read()
        except OSError as e:
            raise CommandError(f"Can't read {file_path}: {e}")

        result = explorer.load_lines(text)
        if not result.ok:
            raise CommandError(f"Invalid lines document: {result.error}")

        self.stdout.write(f"Orientation: {result.orientation.value}")
        self.stdout.write(build_share_url(explorer.share_token(text)))
