#!/usr/bin/env python3
"""
Start the Darshan admin API, or manage its configuration and schema.

    python run.py --env staging
    python run.py --env production --migrate
    python run.py --create-sample development
"""
import argparse
import os
import sys
from pathlib import Path

import uvicorn
from alembic import command
from alembic.config import Config
from pydantic import ValidationError

from darshan_admin.config import ConfigLoader, Environment, Settings, load_config_for_environment

ROOT = Path(__file__).resolve().parent


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Darshan admin dashboard API")
    parser.add_argument(
        "--env",
        choices=[env.value for env in Environment],
        help="Environment to load (default: ENVIRONMENT or development)",
    )

    server = parser.add_argument_group("server overrides")
    server.add_argument("--host")
    server.add_argument("--port", type=int)
    server.add_argument("--workers", type=int)
    server.add_argument("--reload", action="store_true")
    server.add_argument("--debug", action="store_true")

    tools = parser.add_mutually_exclusive_group()
    tools.add_argument("--list-envs", action="store_true", help="List .env.<environment> files")
    tools.add_argument("--validate-env", metavar="ENV", help="Check that .env.ENV loads")
    tools.add_argument("--create-sample", metavar="ENV", help="Write .env.ENV.sample")
    tools.add_argument("--migrate", action="store_true", help="Upgrade the database schema to head and exit")
    return parser


def apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    overrides = {
        "host": args.host,
        "port": args.port,
        "workers": args.workers,
        "reload": True if args.reload else None,
        "debug": True if args.debug else None,
    }
    return settings.model_copy(update={k: v for k, v in overrides.items() if v is not None})


def migrate(settings: Settings) -> None:
    config = Config(str(ROOT / "alembic.ini"))
    config.set_main_option("script_location", str(ROOT / "alembic"))
    # ConfigParser interpolates '%'
    config.set_main_option("sqlalchemy.url", settings.database.url.replace("%", "%%"))
    command.upgrade(config, "head")


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if args.list_envs:
        envs = ConfigLoader.get_available_environments()
        print("Available environments: " + (", ".join(envs) if envs else "none"))
        return 0

    if args.validate_env:
        valid = ConfigLoader.validate_environment_config(args.validate_env)
        print(f".env.{args.validate_env}: {'valid' if valid else 'invalid or missing'}")
        return 0 if valid else 1

    if args.create_sample:
        try:
            path = ConfigLoader.create_sample_env_file(args.create_sample)
        except (ValueError, OSError) as e:
            print(f"Could not create sample configuration: {e}", file=sys.stderr)
            return 1
        print(f"Sample configuration written to {path}")
        return 0

    try:
        settings = apply_overrides(load_config_for_environment(args.env), args)
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    if args.migrate:
        migrate(settings)
        return 0

    # The app (and every worker) re-reads settings from the environment
    os.environ["ENVIRONMENT"] = settings.environment.value
    if settings.debug:
        os.environ["DEBUG"] = "true"

    print(
        f"Starting {settings.app_name} v{settings.app_version} "
        f"({settings.environment.value}) on {settings.host}:{settings.port}"
    )
    uvicorn.run(
        "darshan_admin.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        workers=1 if settings.reload else settings.workers,
        log_level=settings.log_level.value.lower(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
