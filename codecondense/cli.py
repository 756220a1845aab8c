"""
codecondense Command Line

Combines the declarations of every matching file under a directory into one
output file:

    codecondense --dir ./service --sub-dirs --type .go --out service.txt

The original camelCase flag spellings (--subDirs, --extractFuncs, --apiKey, ...)
are accepted as aliases.
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from codecondense.ast.comments import create_comment_generator
from codecondense.ast.models import ExtractionRequest
from codecondense.configs.logging import get_logger, setup_logging
from codecondense.configs.runtime import KNOWN_PROVIDERS, get_full_config
from codecondense.configs.yaml_config import create_default_config, get_config_path
from codecondense.exceptions import ConfigurationError, OutputError, WalkError
from codecondense.ingest.engine import CondenseOptions, condense_directory

logger = get_logger("cli")


def build_parser() -> argparse.ArgumentParser:
    """Argument parser. Unset options stay None so config values can fill them."""
    parser = argparse.ArgumentParser(
        prog="codecondense",
        description="Condense a directory of source files into their imports, globals and function signatures",
    )
    bool_flag = argparse.BooleanOptionalAction

    walk = parser.add_argument_group("walk")
    walk.add_argument("--dir", default=".", help="Directory in which to begin (default: current directory)")
    walk.add_argument("--sub-dirs", "--subDirs", dest="sub_dirs", action=bool_flag, default=None,
                      help="Descend into subdirectories")
    walk.add_argument("--size", type=int, default=None, help="Skip files smaller than this many bytes")
    walk.add_argument("--type", dest="file_type", default=None, help="Only keep files with this extension, e.g. .go")
    walk.add_argument("--modified", default=None,
                      help="Only keep files modified at or after this RFC 3339 time, e.g. 2024-01-01T00:00:00Z")

    extraction = parser.add_argument_group("extraction")
    extraction.add_argument("--extract-funcs", "--extractFuncs", dest="extract_funcs", action=bool_flag,
                            default=None, help="Extract function declarations (default: on)")
    extraction.add_argument("--extract-imports", "--extractImports", dest="extract_imports", action=bool_flag,
                            default=None, help="Extract import statements (default: on)")
    extraction.add_argument("--extract-globals", "--extractGlobals", dest="extract_globals", action=bool_flag,
                            default=None, help="Extract global variable declarations (default: on)")
    extraction.add_argument("--include-methods", dest="include_methods", action=bool_flag, default=None,
                            help="Include methods alongside free functions (default: on)")

    comments = parser.add_argument_group("comments")
    comments.add_argument("--generate-comments", "--generateComments", dest="generate_comments",
                          action=bool_flag, default=None, help="Generate a comment for each extracted function")
    comments.add_argument("--api-key", "--apiKey", dest="api_key", default=None,
                          help="API key for the LLM provider (default: OPENAI_API_KEY / ANTHROPIC_API_KEY)")
    comments.add_argument("--provider", choices=[p for p in KNOWN_PROVIDERS if p != "none"], default=None,
                          help="Primary LLM provider for comments")

    parser.add_argument("--out", default=None, help="Output file (default: output.txt)")
    parser.add_argument("--workers", type=int, default=None, help="Files extracted in parallel")
    parser.add_argument("--config", type=Path, default=None, help="YAML config file")
    parser.add_argument("--init-config", action="store_true",
                        help="Write a default config.yaml to ~/.codecondense (or CODECONDENSE_CONFIG) and exit")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def _pick(cli_value, config_value):
    return config_value if cli_value is None else cli_value


def resolve_options(args: argparse.Namespace, config: dict) -> CondenseOptions:
    """Merge parsed flags over the loaded configuration."""
    extraction = config.get("extraction", {})
    walk = config.get("walk", {})
    comments = config.get("comments", {})

    request = ExtractionRequest(
        extract_imports=bool(_pick(args.extract_imports, extraction.get("imports", True))),
        extract_globals=bool(_pick(args.extract_globals, extraction.get("globals", True))),
        extract_functions=bool(_pick(args.extract_funcs, extraction.get("functions", True))),
        generate_comments=bool(_pick(args.generate_comments, comments.get("enabled", False))),
        include_methods=bool(_pick(args.include_methods, extraction.get("include_methods", True))),
    )

    return CondenseOptions(
        root_path=args.dir,
        sub_dirs=bool(_pick(args.sub_dirs, walk.get("sub_dirs", False))),
        min_size=int(_pick(args.size, walk.get("min_size", 0)) or 0),
        file_type=_pick(args.file_type, walk.get("file_type", "")) or "",
        modified_since=_pick(args.modified, walk.get("modified_since", "")) or None,
        request=request,
        out_file=_pick(args.out, config.get("output", {}).get("path", "output.txt")),
        workers=max(1, int(_pick(args.workers, config.get("workers", 1)))),
    )


def apply_llm_overrides(args: argparse.Namespace, config: dict) -> None:
    """Route --provider and --api-key into the llm section of the config."""
    llm = config.setdefault("llm", {})
    if args.provider:
        llm["primary_provider"] = args.provider
    if args.api_key:
        provider = llm.get("primary_provider", "openai")
        if provider in ("openai", "anthropic"):
            section = llm.get(provider) or {}
            section["api_key"] = args.api_key
            llm[provider] = section
        else:
            logger.warning(f"--api-key is ignored for provider {provider}")


def main(argv: Optional[list[str]] = None) -> int:
    """
    Run the condense command.

    Returns:
        Process exit status: 0 on success, 1 on configuration, walk or output
        failure, or when comments are requested without a usable LLM provider
    """
    args = build_parser().parse_args(argv)
    setup_logging(debug=True if args.debug else None)

    if args.init_config:
        config_path = get_config_path()
        try:
            created = create_default_config()
        except OSError as e:
            print(f"Error writing config: {e}", file=sys.stderr)
            return 1
        if created:
            print(f"Created default config at {config_path}")
        else:
            print(f"Config already exists at {config_path}")
        return 0

    try:
        config = get_full_config(args.config)
        apply_llm_overrides(args, config)
        options = resolve_options(args, config)
    except (ConfigurationError, ValueError, TypeError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    summarizer = None
    if options.request.generate_comments:
        try:
            summarizer = create_comment_generator(config)
        except ConfigurationError as e:
            print(
                "API key not provided. Set it via the --api-key flag or the "
                f"OPENAI_API_KEY environment variable. ({e})",
                file=sys.stderr,
            )
            return 1

    try:
        report = condense_directory(options, summarizer)
    except WalkError as e:
        print(f"Error walking file system: {e}", file=sys.stderr)
        return 1
    except OutputError as e:
        print(f"Error writing output: {e}", file=sys.stderr)
        return 1

    for error in report.errors:
        print(f"Error extracting code from {error['file']}: {error['error']}", file=sys.stderr)

    print(f"Successfully combined code into {report.out_file}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
