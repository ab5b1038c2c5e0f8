"""Configuration loader for the code documenter.

Loads settings from configs/config.yaml and provides typed access
to all configuration sections via dataclasses.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "configs" / "config.yaml"


@dataclass
class APIConfig:
    """Configuration for the Anthropic API client."""

    provider: str = "anthropic"
    model: str = "claude-sonnet-4-20250514"
    max_tokens: int = 4096
    temperature: float = 0.2
    timeout: Optional[float] = None


@dataclass
class DiscoveryConfig:
    """Configuration for source file discovery."""

    pattern: str = "**/*.js"
    exclude_patterns: list[str] = field(default_factory=list)
    encoding: str = "utf-8"


@dataclass
class PipelineConfig:
    """Configuration for the documentation pipeline."""

    request_delay: float = 0.5
    language: str = "JavaScript"


@dataclass
class OutputConfig:
    """Configuration for documentation output."""

    output_dir: str = "docs/generated"
    extension: str = ".md"


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: Optional[str] = None


@dataclass
class AppConfig:
    """Top-level application configuration."""

    api: APIConfig = field(default_factory=APIConfig)
    discovery: DiscoveryConfig = field(default_factory=DiscoveryConfig)
    pipeline: PipelineConfig = field(default_factory=PipelineConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(config_path: Optional[str] = None) -> AppConfig:
    """Load application configuration from a YAML file.

    Reads the YAML config file and constructs a fully typed AppConfig
    object. Falls back to defaults for any missing values. The API key
    is read from the ANTHROPIC_API_KEY environment variable, not from
    the config file.

    Args:
        config_path: Path to the YAML config file. If None, uses the
            default path at configs/config.yaml.

    Returns:
        A fully populated AppConfig instance.

    Raises:
        yaml.YAMLError: If the config file contains invalid YAML.
    """
    path = Path(config_path) if config_path else _DEFAULT_CONFIG_PATH

    if not path.exists():
        logger.warning("Config file not found at %s, using defaults", path)
        return AppConfig()

    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    logger.info("Loaded configuration from %s", path)

    if not os.getenv("ANTHROPIC_API_KEY"):
        logger.warning("ANTHROPIC_API_KEY not set in environment")

    defaults = AppConfig()

    api_data = raw.get("api") or {}
    api_config = APIConfig(
        provider=api_data.get("provider", defaults.api.provider),
        model=api_data.get("model", defaults.api.model),
        max_tokens=api_data.get("max_tokens", defaults.api.max_tokens),
        temperature=api_data.get("temperature", defaults.api.temperature),
        timeout=api_data.get("timeout"),
    )

    discovery_data = raw.get("discovery") or {}
    discovery_config = DiscoveryConfig(
        pattern=discovery_data.get("pattern", defaults.discovery.pattern),
        exclude_patterns=discovery_data.get("exclude_patterns") or [],
        encoding=discovery_data.get("encoding", defaults.discovery.encoding),
    )

    pipeline_data = raw.get("pipeline") or {}
    pipeline_config = PipelineConfig(
        request_delay=pipeline_data.get(
            "request_delay", defaults.pipeline.request_delay
        ),
        language=pipeline_data.get("language", defaults.pipeline.language),
    )

    output_data = raw.get("output") or {}
    output_config = OutputConfig(
        output_dir=output_data.get("output_dir", defaults.output.output_dir),
        extension=output_data.get("extension", defaults.output.extension),
    )

    logging_data = raw.get("logging") or {}
    logging_config = LoggingConfig(
        level=logging_data.get("level", defaults.logging.level),
        format=logging_data.get("format", defaults.logging.format),
        file=logging_data.get("file"),
    )

    return AppConfig(
        api=api_config,
        discovery=discovery_config,
        pipeline=pipeline_config,
        output=output_config,
        logging=logging_config,
    )
