"""
Pipeline configuration for docuarch graph extraction.

This module defines the PipelineConfig dataclass that captures the tunable
parameters of the extraction pipeline. Values can be given directly or read
from the environment (optionally via a .env file).
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from docuarch.constants import SOURCE_JSONLD

logger = logging.getLogger(__name__)

ENV_PREFIX = "DOCUARCH_"


def _env_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass
class PipelineConfig:
    """
    Configuration for the docuarch extraction pipeline.

    Attributes:
        input_path: Path to the input JSON / JSON-LD document (CLI only).
        output_dir: Directory for the processed graph and reports.
        source_label: Value reported as metadata.source for JSON-LD input.

        clique_warning_threshold: Relationship objects with more members than
            this are logged at WARNING with the number of edges they expand to.
        max_clique_members: Hard bound on relationship object members. None
            means unbounded; exceeding it raises CliqueLimitExceeded.

        validate: Run the quality report after processing.
    """

    # Input/Output
    input_path: Optional[Path] = None
    output_dir: Path = field(default_factory=lambda: Path("output"))
    source_label: str = SOURCE_JSONLD

    # Relationship expansion bounds
    clique_warning_threshold: int = 50
    max_clique_members: Optional[int] = None

    validate: bool = False

    def __post_init__(self):
        if isinstance(self.input_path, str):
            self.input_path = Path(self.input_path)

        if isinstance(self.output_dir, str):
            self.output_dir = Path(self.output_dir)

        if self.max_clique_members is not None and self.max_clique_members < 2:
            raise ValueError(
                f"max_clique_members must be at least 2, got {self.max_clique_members}"
            )

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None, **overrides) -> "PipelineConfig":
        """
        Create configuration from DOCUARCH_* environment variables.

        A .env file is loaded first (without overriding variables already set
        in the process environment).

        Args:
            dotenv_path: Explicit .env path. Defaults to python-dotenv discovery.
            **overrides: Field values that take precedence over the environment.

        Returns:
            PipelineConfig populated from the environment.
        """
        load_dotenv(dotenv_path=dotenv_path, override=False)

        values = {}
        output_dir = os.getenv(f"{ENV_PREFIX}OUTPUT_DIR")
        if output_dir:
            values["output_dir"] = Path(output_dir)

        threshold = _env_int(f"{ENV_PREFIX}CLIQUE_WARNING_THRESHOLD")
        if threshold is not None:
            values["clique_warning_threshold"] = threshold

        max_members = _env_int(f"{ENV_PREFIX}MAX_CLIQUE_MEMBERS")
        if max_members is not None:
            values["max_clique_members"] = max_members

        values.update(overrides)
        logger.debug(f"Config from environment: {sorted(values)}")
        return cls(**values)
