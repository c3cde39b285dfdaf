from .config import (
    DEFAULT_CONTENT_SELECTORS,
    DEFAULT_PRUNE_SELECTORS,
    Config,
    ExtractionSettings,
    MonitoringConfig,
    SummarizationSettings,
    find_config_file,
    load_config,
)

__all__ = [
    "Config",
    "ExtractionSettings",
    "SummarizationSettings",
    "MonitoringConfig",
    "DEFAULT_CONTENT_SELECTORS",
    "DEFAULT_PRUNE_SELECTORS",
    "find_config_file",
    "load_config",
]
