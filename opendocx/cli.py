"""opendocx CLI"""

import argparse
import logging
import sys
from pathlib import Path

from opendocx import OpenDocx
from opendocx.config import Settings
from opendocx.logger import configure_logging
from opendocx.wordml.errors import OpenDocxError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Render a JSON document description to WordprocessingML",
        prog="opendocx",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="Write document.xml")
    render.add_argument("input", help="JSON document description")
    render.add_argument("-o", "--output", help="Output document.xml")
    render.add_argument("--styles", help="Also write styles.xml to this path")
    render.add_argument("--pretty", action="store_true", default=None, help="Indent output")
    render.add_argument("--log-level", help="Logging level (default: OPENDOCX_LOG_LEVEL)")

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    settings = Settings.from_env()
    configure_logging(args.log_level or settings.log_level)

    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: {input_path} not found", file=sys.stderr)
        sys.exit(1)

    output_path = Path(args.output) if args.output else input_path.with_suffix(".xml")
    pretty = settings.pretty_print if args.pretty is None else args.pretty

    try:
        renderer = OpenDocx(pretty_print=pretty)
        result = renderer.convert(input_path, output_path, styles_path=args.styles)
        for rel_id, source in renderer.media.items():
            logger.info("%s -> %s", rel_id, source)
        print(f"Rendered: {result}")
    except (OpenDocxError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
