#!/usr/bin/env python3
"""
swaggergen - OpenAPI annotations for model CRUD endpoints.

Usage:
    swaggergen app.models.Product --db-url sqlite:///./app.db
    swaggergen app.models.Product app.models.Tag -c etc/swaggergen.yaml -o docs/
    swaggergen --help
"""

import argparse
import sys
from pathlib import Path
from typing import Any

import sqlalchemy.exc
import yaml  # type: ignore[import-untyped]

from .. import __version__
from ..config import Config
from ..db import Database, Manager
from ..docs import DocsGenerator
from ..dot_dict import DotDict, DotDictPathNotFoundError
from ..exceptions import ConfigurationError, GeneratorError
from ..log import (
    InvalidLogLevelError,
    LogConfig,
    LogError,
    Logger,
    LoggerFactory,
    resolve_level,
)
from ..schema import DatabaseSchemaProvider, SchemaProvider, StaticSchemaProvider
from .output import ConsoleOutput, OutputWriter

DEFAULT_CONNECTION = "db"


class DefaultsHelpFormatter(argparse.HelpFormatter):
    """Help formatter that appends default values to the help text."""

    def _get_help_string(self, action: argparse.Action) -> str:
        help_text = action.help or ""
        if action.default is not argparse.SUPPRESS and action.default not in (None, []):
            return help_text + f" (default: {action.default})"
        return help_text


def _log_level(value: str) -> str:
    try:
        resolve_level(value)
    except InvalidLogLevelError as e:
        raise argparse.ArgumentTypeError(str(e)) from e
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="swaggergen",
        description="Generate OpenAPI annotations for model CRUD endpoints",
        formatter_class=DefaultsHelpFormatter,
    )
    parser.add_argument(
        "models",
        nargs="+",
        metavar="MODEL",
        help="model class path, e.g. app.models.Product or app.models:Product",
    )
    parser.add_argument("-c", "--config", help="YAML configuration file")
    parser.add_argument("--db-url", help="SQLAlchemy URL of the database to inspect")
    parser.add_argument(
        "--db",
        help=f"connection name from the dbs section (schema.connection or '{DEFAULT_CONNECTION}')",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="directory receiving one <Model>.php file per model; stdout when omitted",
    )
    parser.add_argument(
        "--log-level",
        type=_log_level,
        help="log level, overrides logging.level from the configuration",
    )
    parser.add_argument(
        "--path",
        action="append",
        default=[],
        metavar="DIR",
        help="prepend DIR to the import path, may be repeated",
    )
    parser.add_argument(
        "--version", action="version", version=f"swaggergen {__version__}"
    )
    return parser


def _create_logger(cfg: Config | None, level: str | None) -> Logger:
    """Create the root logger from the logging section and the --log-level flag."""
    log_config = LogConfig.from_config(cfg.to_dict() if cfg is not None else {})
    if level is not None:
        log_config = LogConfig.from_params(level, micros=log_config.micros)
    return LoggerFactory.create_root(log_config)


def _open_database(
    lg: Logger, cfg: Config | None, args: argparse.Namespace, schema_cfg: Any
) -> tuple[Database | None, Manager | None]:
    """
    Open the database named on the command line or in the configuration.

    Returns:
        The database (None when no connection is configured) and the manager
        owning it, if any

    Raises:
        ConfigurationError: If a configured connection cannot be opened
    """
    if args.db_url:
        try:
            return Database(lg, DotDict(url=args.db_url)), None
        except (ValueError, ImportError, sqlalchemy.exc.ArgumentError) as e:
            raise ConfigurationError(f"Cannot open database: {e}") from e

    if cfg is None or not cfg.get("dbs"):
        return None, None

    name = args.db or schema_cfg.get("connection") or DEFAULT_CONNECTION
    manager = Manager(lg, cfg)
    try:
        manager.setup()
        return manager.db(name), manager
    except (KeyError, RuntimeError, ValueError) as e:
        available = ",".join(manager.list_databases()) or None
        manager.close_all()
        raise ConfigurationError(
            f"Database connection '{name}' is not available",
            error=e,
            available=available,
        ) from e


def _create_provider(
    lg: Logger, cfg: Config | None, args: argparse.Namespace
) -> tuple[SchemaProvider, Database | Manager | None]:
    """
    Pick the schema provider.

    Tables written into the configuration take precedence unless --db-url is
    given; otherwise the schema is reflected from a database.
    """
    schema_cfg = (cfg.get("schema") if cfg is not None else None) or DotDict()

    if not args.db_url and schema_cfg.get("tables") is not None:
        lg.debug("using static schema", extra={"config": str(cfg.path) if cfg else None})
        return StaticSchemaProvider.from_config(schema_cfg), None

    db, manager = _open_database(lg, cfg, args, schema_cfg)
    aliases = schema_cfg.get("type_aliases") or {}
    provider = DatabaseSchemaProvider(
        lg, db, type_aliases={str(k): str(v) for k, v in aliases.items()}
    )
    return provider, manager if manager is not None else db


def _close(resource: Database | Manager | None) -> None:
    if isinstance(resource, Manager):
        resource.close_all()
    elif resource is not None:
        resource.dispose()


def _generate(
    lg: Logger, cfg: Config | None, args: argparse.Namespace, out: OutputWriter
) -> int:
    provider, resource = _create_provider(lg, cfg, args)
    try:
        # Every model is resolved before anything is written
        generators = [DocsGenerator(model, provider) for model in args.models]

        for generator in generators:
            if args.output is None:
                out.write(generator.generate_crud_docs())
                continue
            path = args.output / f"{generator.model_name}.php"
            generator.generate_to_file(path)
            lg.info(
                "wrote docs",
                extra={"model": generator.model_name, "path": str(path)},
            )
        out.flush()
    finally:
        _close(resource)
    return 0


def main(argv: list[str] | None = None, out: OutputWriter | None = None) -> int:
    """
    Main entry point for the swaggergen command.

    Returns:
        0 on success, 1 when documentation could not be generated; argument
        and configuration errors exit with status 2
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    for path in reversed(args.path):
        sys.path.insert(0, path)

    try:
        cfg = Config(args.config) if args.config else None
        lg = _create_logger(cfg, args.log_level)
    except (
        OSError,
        ValueError,
        yaml.YAMLError,
        DotDictPathNotFoundError,
        LogError,
    ) as e:
        parser.error(f"cannot load configuration: {e}")

    try:
        return _generate(lg, cfg, args, out if out is not None else ConsoleOutput())
    except GeneratorError as e:
        lg.error(e.message, extra=e.context)
        return 1


if __name__ == "__main__":
    sys.exit(main())
