"""anim2mp4 core: converter base, shared contracts, settings, pre-flight."""

from .converter_base import BaseConverter
from .contracts import (
    ConversionMethod,
    ConversionOutcome,
    ConversionOutput,
    ConversionRequest,
    Dimensions,
    StrategyOutcome,
)
from .errors import ConversionError
from .logging import setup_logging
from .preflight import PreflightReport, check_dependencies
from .settings import AppSettings, load_settings

__all__ = [
    "BaseConverter",
    "ConversionMethod",
    "ConversionOutcome",
    "ConversionOutput",
    "ConversionRequest",
    "Dimensions",
    "StrategyOutcome",
    "ConversionError",
    "setup_logging",
    "PreflightReport",
    "check_dependencies",
    "AppSettings",
    "load_settings",
]
