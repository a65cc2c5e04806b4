"""
Command line front end for the Magnet URI codec.

Examples:
  magnet-uri parse "magnet:?xt.1=urn:sha1:A&xt.2=urn:sha1:B"
  magnet-uri normalize "magnet:?dn=Example&xt=urn:sha1:A"
  magnet-uri compare "magnet:?xt=A&dn=B" "magnet:?dn=B&xt=A"
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from typing import List, Optional, Sequence

from config import AppConfig, ConfigError, load_config, parse_log_level, parse_output_format
from magnet import MagnetURI, MagnetURIError, equal, parse, to_string

LOG = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_DIFFERENT = 1
EXIT_INVALID = 2


def build_parser() -> argparse.ArgumentParser:
  parser = argparse.ArgumentParser(
    prog="magnet-uri",
    description="Parse, normalize and compare Magnet URIs.",
    epilog=__doc__,
    formatter_class=argparse.RawDescriptionHelpFormatter,
  )
  parser.add_argument(
    "--log-level",
    default=None,
    help="Logging level (overrides MAGNET_LOG_LEVEL)",
  )
  parser.add_argument(
    "--format",
    dest="output_format",
    default=None,
    help="Output format for 'parse': text or json (overrides MAGNET_OUTPUT_FORMAT)",
  )

  commands = parser.add_subparsers(dest="command", required=True)

  parse_cmd = commands.add_parser("parse", help="List the parameters of a Magnet URI")
  parse_cmd.add_argument("uri", help="Raw Magnet URI")

  normalize_cmd = commands.add_parser("normalize", help="Print the canonical form of a Magnet URI")
  normalize_cmd.add_argument("uri", help="Raw Magnet URI")

  compare_cmd = commands.add_parser("compare", help="Check whether two Magnet URIs are equal")
  compare_cmd.add_argument("first", help="First raw Magnet URI")
  compare_cmd.add_argument("second", help="Second raw Magnet URI")

  return parser


def format_parameters(uri: MagnetURI, output_format: str) -> str:
  if output_format == "json":
    return json.dumps(uri.to_dict(), ensure_ascii=False, indent=2)

  lines: List[str] = []
  for parameter in uri.parameters:
    index = "-" if parameter.index is None else str(parameter.index)
    lines.append(f"{parameter.prefix.value}\t{index}\t{parameter.value}")
  return "\n".join(lines)


def _resolve_config(args: argparse.Namespace) -> AppConfig:
  config = load_config()
  level = config.logging.level
  output_format = config.output_format
  if args.log_level:
    level = parse_log_level(args.log_level)
  if args.output_format:
    output_format = parse_output_format(args.output_format)
  return replace(config, logging=replace(config.logging, level=level), output_format=output_format)


def _parse_logged(raw: str) -> MagnetURI:
  uri = parse(raw)
  LOG.debug("Parsed %d parameter(s) from %r.", len(uri.parameters), raw)
  return uri


def run(args: argparse.Namespace, config: AppConfig) -> int:
  if args.command == "parse":
    print(format_parameters(_parse_logged(args.uri), config.output_format))
    return EXIT_OK

  if args.command == "normalize":
    print(to_string(_parse_logged(args.uri)))
    return EXIT_OK

  first = _parse_logged(args.first)
  second = _parse_logged(args.second)
  same = equal(first, second)
  print("equal" if same else "different")
  return EXIT_OK if same else EXIT_DIFFERENT


def main(argv: Optional[Sequence[str]] = None) -> int:
  parser = build_parser()
  args = parser.parse_args(argv)

  try:
    config = _resolve_config(args)
  except ConfigError as exc:
    parser.error(str(exc))

  logging.basicConfig(level=config.logging.level, format=config.logging.format)

  try:
    return run(args, config)
  except MagnetURIError as exc:
    LOG.warning("Rejected Magnet URI: %s", exc)
    print(f"error: {exc}", file=sys.stderr)
    return EXIT_INVALID


if __name__ == "__main__":
  sys.exit(main())
