"""Configuration helpers for pubfeed."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

DEFAULT_DATA_DIR = Path("src") / "data"
DEFAULT_INSPIRE_URL = "https://inspirehep.net/api/literature"

DEFAULT_KEYWORDS = [
    "machine learning",
    "deep learning",
    "neural network",
    "artificial intelligence",
    "simulation-based inference",
    "normalizing flow",
    "generative model",
    "diffusion model",
    "transformer",
    "graph neural",
    "variational",
    "bayesian neural",
    "surrogate model",
    "emulator",
    "likelihood-free",
    "foundation model",
    "reinforcement learning",
    "classification",
    "regression",
    "anomaly detection",
    "generative adversarial",
    "autoencoder",
    "contrastive learning",
    "representation learning",
]


class Settings(BaseModel):
    """Runtime configuration loaded from env vars with sensible defaults."""

    members_path: Path = Field(default_factory=lambda: DEFAULT_DATA_DIR / "members.yml")
    output_path: Path = Field(default_factory=lambda: DEFAULT_DATA_DIR / "publications.yml")
    inspire_base_url: str = DEFAULT_INSPIRE_URL
    lookback_months: int = 6
    page_size: int = 250
    request_delay: float = 0.2
    request_timeout: float = 30.0
    keywords: list[str] = Field(default_factory=lambda: list(DEFAULT_KEYWORDS))
    log_level: str = "INFO"

    @classmethod
    def load(cls) -> "Settings":
        load_dotenv()
        keywords = list(DEFAULT_KEYWORDS)
        if raw_keywords := os.environ.get("PUBFEED_KEYWORDS"):
            keywords = [kw.strip() for kw in raw_keywords.split(",") if kw.strip()]
        return cls(
            members_path=Path(
                os.environ.get("PUBFEED_MEMBERS_PATH", DEFAULT_DATA_DIR / "members.yml")
            ),
            output_path=Path(
                os.environ.get("PUBFEED_OUTPUT_PATH", DEFAULT_DATA_DIR / "publications.yml")
            ),
            inspire_base_url=os.environ.get("PUBFEED_INSPIRE_URL", DEFAULT_INSPIRE_URL),
            lookback_months=int(os.environ.get("PUBFEED_LOOKBACK_MONTHS", 6)),
            page_size=int(os.environ.get("PUBFEED_PAGE_SIZE", 250)),
            request_delay=float(os.environ.get("PUBFEED_REQUEST_DELAY", 0.2)),
            request_timeout=float(os.environ.get("PUBFEED_REQUEST_TIMEOUT", 30)),
            keywords=keywords,
            log_level=os.environ.get("PUBFEED_LOG_LEVEL", "INFO"),
        )


def get_settings() -> Settings:
    """Convenience accessor for lazy modules."""
    return Settings.load()
