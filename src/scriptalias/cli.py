from __future__ import annotations

import argparse
import importlib.metadata
import logging
from pathlib import Path

from .settings import default_log_level


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="scriptalias")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: SCRIPTALIAS_LOG_LEVEL or WARNING).",
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    sub.add_parser("version", help="Print scriptalias version.")

    p_gen = sub.add_parser("gen", help="Generate alias definitions from a descriptor manifest.")
    p_gen.add_argument("--descriptors", required=True, help="Descriptor manifest JSON file.")
    p_gen.add_argument("--out", required=True, help="Output script file path.")
    p_gen.add_argument("--jobs", type=int, default=1, help="Worker threads used for rendering.")
    p_gen.add_argument("--indent", type=int, default=4, help="Spaces per indentation level.")
    p_gen.add_argument(
        "--cache",
        action="store_true",
        help="Render identical descriptors once (useful for manifests with duplicates).",
    )

    args = parser.parse_args(argv)

    level = default_log_level()
    if args.log_level:
        named = logging.getLevelName(args.log_level.upper())
        if not isinstance(named, int):
            raise SystemExit(f"unknown log level: {args.log_level}")
        level = named
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if args.cmd == "version":
        try:
            print(importlib.metadata.version("scriptalias"))
        except importlib.metadata.PackageNotFoundError:
            # Source checkout without installed metadata.
            print("0.0.0")
        return

    if args.cmd == "gen":
        from .caching import CachingAliasGenerator
        from .codegen import default_generator
        from .errors import ScriptAliasError
        from .manifest import read_descriptors
        from .unit import UnitOptions, generate_aliases

        if args.jobs < 1:
            raise SystemExit("--jobs must be at least 1")
        if args.indent < 0:
            raise SystemExit("--indent must not be negative")

        opts = UnitOptions(indent=" " * args.indent, jobs=args.jobs)
        generator = default_generator(indent=opts.indent)
        if args.cache:
            generator = CachingAliasGenerator(generator)

        try:
            descriptors = read_descriptors(Path(args.descriptors))
            if not descriptors:
                raise SystemExit("descriptor manifest contains no usable aliases")
            generate_aliases(descriptors, out_file=Path(args.out), generator=generator, opts=opts)
        except ScriptAliasError as e:
            raise SystemExit(str(e)) from e
        return
