"""
Configuration management for pagedigest using Pydantic.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# --- Setup Logging ---
log = logging.getLogger(__name__)

# Rule order is priority order; the paragraph rule must stay last.
PARAGRAPH_SELECTOR = "p"

DEFAULT_CONTENT_SELECTORS: List[str] = [
    "article",
    "main",
    "div.post-content",
    "div.entry-content",
    "div.article-content",
    "div.body-content",
    'div[itemprop="articleBody"]',
    PARAGRAPH_SELECTOR,
]

DEFAULT_PRUNE_SELECTORS: List[str] = [
    # structural chrome
    "header",
    "footer",
    "nav",
    "aside",
    # non-renderable
    "script",
    "style",
    "noscript",
    "template",
    # embedded media
    "img",
    "video",
    "audio",
    "iframe",
    "svg",
    "canvas",
    "object",
    "embed",
    "picture",
    # form controls
    "form",
    "button",
    "input",
    "textarea",
    "select",
    # class and attribute boilerplate
    ".sidebar",
    ".ad",
    ".ads",
    ".adsbygoogle",
    ".advertisement",
    ".widget",
    ".comments",
    ".comment-section",
    ".share",
    ".share-buttons",
    ".social-share",
    ".icon",
    ".header",
    ".footer",
    ".navigation",
    ".menu",
    ".hidden",
    ".d-none",
    ".display-none",
    '[aria-hidden="true"]',
    "[hidden]",
]


def _check_selectors(selectors: List[str]) -> List[str]:
    # Imported lazily: the extractor package imports this module.
    from pagedigest.extractor.rules import parse_selector

    for selector in selectors:
        parse_selector(selector)
    return selectors


# --- Nested Configuration Models ---


class ExtractionSettings(BaseModel):
    """Configuration for main-content extraction."""

    min_candidate_length: int = Field(
        default=200,
        ge=0,
        description="A candidate's text must be strictly longer than this many characters to win.",
    )
    content_selectors: List[str] = Field(
        default_factory=lambda: list(DEFAULT_CONTENT_SELECTORS),
        description="Candidate selectors in priority order. The paragraph rule is always tried last.",
    )
    prune_selectors: List[str] = Field(
        default_factory=lambda: list(DEFAULT_PRUNE_SELECTORS),
        description="Subtrees matching any of these selectors are removed before candidate search.",
    )

    @field_validator("content_selectors")
    @classmethod
    def validate_content_selectors(cls, v: List[str]) -> List[str]:
        """Parse every selector and make sure the paragraph fallback closes the list."""
        selectors = [s.strip() for s in v if s.strip()]
        if PARAGRAPH_SELECTOR in selectors:
            selectors.remove(PARAGRAPH_SELECTOR)
        selectors.append(PARAGRAPH_SELECTOR)
        return _check_selectors(selectors)

    @field_validator("prune_selectors")
    @classmethod
    def validate_prune_selectors(cls, v: List[str]) -> List[str]:
        return _check_selectors([s.strip() for s in v if s.strip()])


class SummarizationSettings(BaseModel):
    """Configuration for the classic extractive summarizer."""

    provider: str = Field(default="classic", description="Summarization backend used by the pipeline.")
    default_sentence_count: int = Field(default=5, ge=1, description="Sentences per summary when none is given.")
    keyword_count: int = Field(default=10, ge=1, description="Number of top keywords used for scoring.")
    min_token_length: int = Field(default=3, ge=1, description="Shorter tokens are ignored as keywords.")
    edge_bonus: float = Field(default=3.0, description="Bonus for the first and the last sentence.")
    near_edge_bonus: float = Field(default=1.0, description="Bonus for other sentences near either end.")
    edge_fraction: float = Field(
        default=0.2, ge=0.0, le=0.5, description="Share of the text counted as 'near' each end."
    )
    short_sentence_length: int = Field(default=30, ge=0, description="Sentences shorter than this are penalized.")
    short_sentence_penalty: float = Field(default=2.0, ge=0.0, description="Penalty for short sentences.")

    @field_validator("provider")
    @classmethod
    def validate_provider(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("provider must not be empty")
        return v.strip().lower()


class MonitoringConfig(BaseModel):
    """Configuration for logging and metrics."""

    log_level: str = Field(default="WARNING", description="Logging level (e.g., DEBUG, INFO, WARNING).")
    log_file: str | None = Field(
        default=None,
        description="Path to log file. If None, logs to the console (stderr).",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("log_file", mode="before")
    @classmethod
    def create_parent_dir(cls, v: str | Path | None) -> str | None:
        if v is None:
            return None
        path = Path(v)
        path.parent.mkdir(parents=True, exist_ok=True)
        return str(path)


# --- Main Configuration Class ---


class Config(BaseSettings):
    project_name: str = "pagedigest"
    extraction: ExtractionSettings = Field(default_factory=ExtractionSettings)
    summarization: SummarizationSettings = Field(default_factory=SummarizationSettings)
    monitoring: MonitoringConfig = Field(default_factory=MonitoringConfig)

    model_config = SettingsConfigDict(env_prefix="PAGEDIGEST_", env_nested_delimiter="__", case_sensitive=False)

    @classmethod
    def from_yaml(cls, path: Path) -> Config:
        log.debug("Loading configuration from YAML file: %s", path)
        if not path.is_file():
            raise FileNotFoundError(f"Configuration file not found or is not a file: {path}")
        with open(path, "r", encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f)
        if not yaml_data:
            log.warning("Configuration file is empty: %s. Using default settings.", path)
            return cls.model_validate({})
        return cls.model_validate(yaml_data)


def find_config_file() -> Path | None:
    current_dir = Path.cwd()
    for path in (current_dir / "pagedigest.yaml", current_dir / "pagedigest.yml"):
        if path.exists():
            return path
    return None


def load_config(path: Optional[Path] = None) -> Config:
    """Load configuration from an explicit file, a discovered file, or defaults.

    An explicit ``path`` must load cleanly. A discovered file that fails to
    validate is reported and replaced by the defaults.
    """
    if path is not None:
        return Config.from_yaml(path)

    config_path = find_config_file()
    if config_path:
        try:
            log.info("Loading configuration from: %s", config_path)
            return Config.from_yaml(config_path)
        except (ValidationError, yaml.YAMLError) as e:
            log.error(
                "Failed to load or validate configuration from '%s': %s. Falling back to default settings.",
                config_path,
                e,
            )
    return Config()
