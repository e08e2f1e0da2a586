"""
fbs-rpc: rpc_service method define generator

Scans schema files for `rpc_service` blocks and writes method-name constants
(plus provider interfaces) for the requested languages.

Usage:
    python -m fbs_rpc schema/monster.fbs --lang rust python \\
        --output-dir build/generated

    # With a JSON config (flags override its values):
    python -m fbs_rpc --config rpc.json schema/*.fbs
"""

import argparse
import logging
import os
from typing import List, Tuple

from .config import LANGUAGES, ConfigError, GeneratorConfig, load_config
from .errors import ParseError
from .generators.base import GenerationError
from .logger import setup_logging
from .models import RpcService
from .parser import ServiceParser

logger = logging.getLogger("fbs_rpc.main")

EXIT_OK = 0
EXIT_PARSE_ERRORS = 1
EXIT_USAGE = 2


def scan_file(path: str, strict: bool = False) -> Tuple[List[RpcService], List[ParseError]]:
    """Run the scanner over one file, collecting services and errors separately."""
    services, errors = [], []
    with open(path, "r", encoding="utf-8") as f:
        for result in ServiceParser(f, strict=strict):
            if isinstance(result, ParseError):
                errors.append(result)
            else:
                services.append(result)
    return services, errors


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fbs-rpc", description="rpc_service method define generator")
    parser.add_argument("files", nargs="+", help="Schema file(s) to scan")
    parser.add_argument("--config", help="JSON generator config")
    parser.add_argument("--lang", nargs="+", choices=LANGUAGES,
                        help="Languages to generate (default: rust cpp python)")
    parser.add_argument("--output-dir", help="Base output directory (default: build/generated)")
    parser.add_argument("--strict", action="store_true", default=None,
                        help="Report services missing their closing bracket")
    parser.add_argument("--service", action="append", dest="services", metavar="NAME",
                        help="Only generate the named service (repeatable)")
    parser.add_argument("--dry-run", action="store_true", help="Parse and report, write nothing")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def _resolve_config(args) -> GeneratorConfig:
    config = load_config(args.config) if args.config else GeneratorConfig()
    if args.lang:
        config.languages = args.lang
    if args.output_dir:
        config.output_dir = args.output_dir
    if args.strict is not None:
        config.strict = args.strict
    if args.services:
        config.services = args.services
    return config


def main(argv=None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = _resolve_config(args)
    except (OSError, ConfigError) as e:
        logger.error(f"Invalid config {args.config}: {e}")
        return EXIT_USAGE

    services: List[RpcService] = []
    error_count = 0
    seen = {}

    for path in args.files:
        print(f"[fbs-rpc] Scanning {path}...")
        try:
            found, errors = scan_file(path, strict=config.strict)
        except OSError as e:
            logger.error(f"Cannot read {path}: {e}")
            error_count += 1
            continue
        except UnicodeDecodeError as e:
            logger.error(f"{path} is not valid UTF-8: {e}")
            error_count += 1
            continue

        for e in errors:
            logger.error(f"{path}:{e.lineno}: {e.describe()}")
        error_count += len(errors)

        for svc in found:
            if not config.wants(svc.name):
                logger.debug(f"Skipping rpc_service {svc.name} (not selected)")
                continue
            if svc.name in seen:
                # First definition wins
                logger.error(f"{path}: rpc_service {svc.name} was already defined in {seen[svc.name]}")
                error_count += 1
                continue
            seen[svc.name] = path
            services.append(svc)
        print(f"[fbs-rpc] Found {len(found)} services, {len(errors)} errors in {path}")

    if config.services:
        for name in config.services:
            if name not in seen:
                logger.warning(f"Requested rpc_service {name} was not found")

    if not services:
        print("[fbs-rpc] No rpc_service definitions to generate.")
        return EXIT_PARSE_ERRORS if error_count else EXIT_OK

    output_files = {}
    try:
        for gen in _get_generators(config.languages):
            output_files.update(gen.generate(services, output_dir=config.output_dir))
    except GenerationError as e:
        for msg in e.errors:
            logger.error(msg)
        print("[fbs-rpc] Nothing written.")
        return EXIT_PARSE_ERRORS

    for filename, content in output_files.items():
        if args.dry_run:
            print(f"[fbs-rpc] Would write {filename}")
            continue
        os.makedirs(os.path.dirname(filename), exist_ok=True)
        print(f"[fbs-rpc] Writing {filename}")
        with open(filename, "w", encoding="utf-8") as f:
            f.write(content)

    print(f"[fbs-rpc] Complete. {len(services)} services, {len(output_files)} files in {config.output_dir}/")
    return EXIT_PARSE_ERRORS if error_count else EXIT_OK


def _get_generators(languages):
    """Create generator instances for each requested language."""
    generators = []
    for lang in languages:
        if lang == "rust":
            from .generators.rust import RustGenerator
            generators.append(RustGenerator())
        elif lang == "cpp":
            from .generators.cpp import CppGenerator
            generators.append(CppGenerator())
        elif lang == "python":
            from .generators.python import PythonGenerator
            generators.append(PythonGenerator())
    return generators
