"""
Analysis Settings.

This module defines the Pydantic model that carries every tunable knob of an
analysis run: how interaction records are read, how much weight each record
contributes, and the PageRank parameters. Defaults match the classic setup
for e-mail logs (semicolon-separated, header line, weight 5 per message,
damping 0.85, 100 iterations, top 5).

Values can come from the environment (or a `.env` file) through
`AnalysisSettings.from_env()`; the CLI then overrides individual fields.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# --- Environment variable names ---
ENV_PREFIX = "COMMGRAPH_"
ENV_FIELDS = {
    "DAMPING": "damping_factor",
    "ITERATIONS": "iterations",
    "WEIGHT": "record_weight",
    "DELIMITER": "delimiter",
    "TOP_K": "top_k",
    "NODES": "node_count",
}


class AnalysisSettings(BaseModel):
    """Parameters for reading interaction logs and ranking their nodes."""

    damping_factor: float = 0.85
    iterations: int = Field(default=100, ge=0)
    record_weight: int = Field(default=5, ge=1)
    delimiter: str = Field(default=";", min_length=1, max_length=1)
    skip_header: bool = True
    node_count: Optional[int] = Field(default=None, ge=0)
    top_k: int = Field(default=5, ge=1)

    @field_validator("damping_factor")
    @classmethod
    def _damping_in_open_interval(cls, value: float) -> float:
        if not 0.0 < value < 1.0:
            raise ValueError("damping_factor must lie strictly between 0 and 1")
        return value

    @classmethod
    def from_env(cls, **overrides: Any) -> "AnalysisSettings":
        """
        Builds settings from `COMMGRAPH_*` environment variables.

        A `.env` file in the working directory is loaded first; variables
        already set in the environment win over it. Keyword arguments whose
        value is not None take precedence over both.
        """
        load_dotenv(dotenv_path=Path.cwd() / ".env")
        values: Dict[str, Any] = {}
        for suffix, field_name in ENV_FIELDS.items():
            raw = os.getenv(ENV_PREFIX + suffix)
            if raw is not None and raw != "":
                values[field_name] = raw
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
