from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import DEFAULT_SERVICE_NAME, GeneratorConfig
from .errors import ServicegenError
from .generator import OutputSpec, generate_output
from .ir import build_client
from .loader import load_document, load_mapping


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="servicegen",
        description="Generate TypeScript service bindings from a normalized client document.",
    )
    parser.add_argument("input", help="Path or URL of the client document (JSON/YAML)")
    parser.add_argument("-o", "--output-dir", type=Path, default=Path("."), help="Output directory")
    parser.add_argument("--config", help="Generator configuration file (JSON/YAML); overrides the options below")
    parser.add_argument("--client", default="fetch", help="fetch, xhr, node, axios, angular or @hey-api/client-*")
    parser.add_argument("--name", default=None, help="Custom client class name (injected services)")
    parser.add_argument(
        "--no-use-options",
        dest="use_options",
        action="store_false",
        help="Bind one positional parameter per field instead of a data object",
    )
    parser.add_argument("--as-class", action="store_true", help="Emit one class per service")
    parser.add_argument("--response", choices=("body", "response"), default="body", help="Services response mode")
    parser.add_argument("--service-name", default=DEFAULT_SERVICE_NAME, help="Service class name template")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.config:
            config = GeneratorConfig.from_mapping(load_mapping(args.config))
        else:
            config = GeneratorConfig.from_options(
                client=args.client,
                name=args.name,
                use_options=args.use_options,
                as_class=args.as_class,
                response=args.response,
                service_name=args.service_name,
            )
        client = build_client(load_document(args.input))
        generate_output(OutputSpec(output_dir=args.output_dir), client, config)
    except ServicegenError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except FileNotFoundError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
