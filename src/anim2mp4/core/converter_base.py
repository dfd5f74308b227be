"""Base class for conversion strategies.

Every converter declares a typed Config via Pydantic and shares the
encoder and tool settings. ``execute`` raises on failure; ``attempt``
wraps it into a tagged ``ConversionOutcome`` so the strategy selector
can decide on a fallback without catching exceptions itself.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import ClassVar, Generic, TypeVar

from pydantic import BaseModel

from .contracts import ConversionMethod, ConversionOutcome, ConversionOutput, ConversionRequest
from .errors import ConversionError, InputNotFoundError
from .settings import EncodeConfig, ToolsConfig

ConfigT = TypeVar("ConfigT", bound=BaseModel)

logger = logging.getLogger(__name__)


class BaseConverter(ABC, Generic[ConfigT]):
    """Abstract base for converters.

    Subclasses must:
    1. Set class variables: method, config_type
    2. Implement run()

    Example:
        class DirectConverter(BaseConverter[DirectConfig]):
            method = ConversionMethod.DIRECT
            config_type = DirectConfig

            def run(self, request: ConversionRequest) -> ConversionOutput: ...
    """

    method: ClassVar[ConversionMethod]
    config_type: ClassVar[type[BaseModel]]

    def __init__(
        self,
        config: ConfigT | None = None,
        encode: EncodeConfig | None = None,
        tools: ToolsConfig | None = None,
    ):
        self.config = config if config is not None else self.config_type()
        self.encode = encode or EncodeConfig()
        self.tools = tools or ToolsConfig()

    @property
    def name(self) -> str:
        return self.method.value

    @abstractmethod
    def run(self, request: ConversionRequest) -> ConversionOutput:
        """Produce the output video. Raises ConversionError on failure."""
        ...

    def validate_inputs(self, request: ConversionRequest) -> bool:
        """Check that the input file exists."""
        if not request.input_path.is_file():
            logger.error(f"Input not found: {request.input_path}")
            return False
        return True

    def execute(self, request: ConversionRequest) -> ConversionOutput:
        """Run with logging, timing, and validation."""
        logger.info(f"[{self.name}] Validating inputs...")
        if not self.validate_inputs(request):
            raise InputNotFoundError(f"input file does not exist: {request.input_path}")

        logger.info(f"[{self.name}] Starting...")
        t0 = time.time()
        result = self.run(request)
        elapsed = time.time() - t0
        logger.info(f"[{self.name}] Done in {elapsed:.1f}s")
        return result.model_copy(update={"elapsed_seconds": elapsed})

    def attempt(self, request: ConversionRequest) -> ConversionOutcome:
        """Execute and tag the result instead of raising."""
        try:
            output = self.execute(request)
        except ConversionError as err:
            logger.info(f"[{self.name}] Failed: {err}")
            return ConversionOutcome(method=self.method, error=err)
        return ConversionOutcome(method=self.method, output=output)

    def transcoder_cmd(self, *args: str) -> list[str]:
        return [self.tools.transcoder, *args]

    @classmethod
    def get_config_schema(cls) -> dict:
        """Return JSON schema for config."""
        return cls.config_type.model_json_schema()
