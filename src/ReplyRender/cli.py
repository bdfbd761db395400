from __future__ import annotations

import argparse
import logging
from pathlib import Path

from . import markdown_parser, plain_text, renderer_docx, renderer_html
from .utils import FORMAT_SUFFIXES, configure_logging, read_reply, resolve_output_path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ReplyRender",
        description="Convert an AI assistant reply into standalone HTML, plain text or DOCX.",
    )
    parser.add_argument("input", type=str, help="Path to the reply text file")
    parser.add_argument("-o", "--output", type=str, help="Output path")
    parser.add_argument(
        "-f", "--format", choices=sorted(FORMAT_SUFFIXES), default="html", help="Output format"
    )
    parser.add_argument("--title", type=str, default=renderer_html.DEFAULT_TITLE, help="Document title")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose)
    input_path = Path(args.input).expanduser()
    if not input_path.exists():
        raise FileNotFoundError(f"Input file not found: {input_path}")
    output_path = resolve_output_path(input_path, args.output, args.format)

    logging.info("Reading %s", input_path)
    reply = read_reply(input_path)
    logging.debug("Reply length: %d chars", len(reply))

    logging.info("Parsing reply...")
    document = markdown_parser.parse_reply(reply)
    logging.debug("Parsed %d blocks", len(document.blocks))

    logging.info("Writing %s to %s", args.format, output_path)
    if args.format == "html":
        renderer_html.write_html(document, output_path, title=args.title)
    elif args.format == "txt":
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(plain_text.to_plain_text(document), encoding="utf-8")
    else:
        renderer_docx.render_document(document, output_path, title=args.title)

    logging.info("Done. Saved to %s", output_path)


if __name__ == "__main__":
    main()
