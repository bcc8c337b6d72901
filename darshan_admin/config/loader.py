"""
Per-environment configuration files.

``.env.<environment>`` files sit in the working directory next to ``run.py``;
``run.py --create-sample <environment>`` writes a template to start from.
"""
import logging
import os
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from pydantic import ValidationError

from .settings import Environment, Settings

logger = logging.getLogger(__name__)


def env_file_for(environment: Environment) -> Path:
    return Path(f".env.{environment.value}")


def _sample_sections(env: Environment, defaults: Settings) -> Sequence[Tuple[str, Sequence[Tuple[str, object]]]]:
    dev = env is Environment.DEVELOPMENT
    flag = "true" if dev else "false"
    return [
        ("Application", [
            ("APP_NAME", defaults.app_name),
            ("ENVIRONMENT", env.value),
            ("DEBUG", flag),
        ]),
        ("Server", [
            ("HOST", defaults.host),
            ("PORT", defaults.port),
            ("RELOAD", flag),
            ("WORKERS", 1 if dev else 4),
        ]),
        ("Logging", [
            ("LOG_LEVEL", "DEBUG" if dev else defaults.log_level.value),
            ("LOG_FORMAT", "text" if dev else "json"),
        ]),
        ("Row store", [
            ("DATABASE_URL", defaults.database.url),
            ("DATABASE_ECHO", "false"),
        ]),
        ("CORS", [
            ("CORS_ORIGINS", ",".join(defaults.cors.origins)),
        ]),
        ("Overview page", [
            ("DASHBOARD_RECENT_LIMIT", defaults.dashboard.recent_limit),
        ]),
    ]


class ConfigLoader:
    """Loads, lists, validates and scaffolds ``.env.<environment>`` files"""

    @staticmethod
    def resolve_environment(environment: Optional[str] = None) -> Environment:
        """Explicit name, else ENVIRONMENT, else development"""
        return Environment((environment or os.getenv("ENVIRONMENT", "development")).lower())

    @classmethod
    def load_environment_config(cls, environment: Optional[str] = None) -> Settings:
        env = cls.resolve_environment(environment)
        env_file = env_file_for(env)
        if not env_file.exists():
            logger.warning(f"{env_file} not found, using defaults and the process environment")
            return Settings(environment=env)
        logger.info(f"Loading configuration from {env_file}")
        return Settings(_env_file=str(env_file), environment=env)

    @staticmethod
    def get_available_environments() -> List[str]:
        return sorted(
            path.name[len(".env."):]
            for path in Path(".").glob(".env.*")
            if not path.name.endswith(".sample")
        )

    @classmethod
    def validate_environment_config(cls, environment: str) -> bool:
        """True when ``.env.<environment>`` exists and parses into Settings"""
        try:
            env = Environment(environment.lower())
        except ValueError:
            logger.error(f"Unknown environment '{environment}'")
            return False

        if not env_file_for(env).exists():
            return False
        try:
            settings = cls.load_environment_config(env.value)
        except ValidationError as e:
            logger.error(f"Invalid configuration in {env_file_for(env)}: {e}")
            return False
        return bool(settings.database.url)

    @staticmethod
    def create_sample_env_file(environment: str, output_path: Optional[str] = None) -> str:
        """Write a commented template for ``environment``; returns its path"""
        env = Environment(environment.lower())
        output_path = output_path or f"{env_file_for(env)}.sample"

        lines = [
            f"# Sample configuration for the {env.value} environment",
            f"# Copy to {env_file_for(env)} and adjust",
            "",
        ]
        for title, entries in _sample_sections(env, Settings()):
            lines.append(f"# {title}")
            lines.extend(f"{key}={value}" for key, value in entries)
            lines.append("")

        Path(output_path).write_text("\n".join(lines), encoding="utf-8")
        return output_path


def load_config_for_environment(environment: Optional[str] = None) -> Settings:
    return ConfigLoader.load_environment_config(environment)
