"""Strategy selector: picks a converter and applies the auto fallback."""

from __future__ import annotations

import logging

from anim2mp4.converters.direct.converter import DirectConverter
from anim2mp4.converters.extract.converter import ExtractConverter

from .contracts import ConversionMethod, ConversionOutcome, ConversionRequest, StrategyOutcome
from .converter_base import BaseConverter
from .errors import InputNotFoundError
from .settings import AppSettings

logger = logging.getLogger(__name__)


def build_converters(settings: AppSettings) -> dict[ConversionMethod, BaseConverter]:
    """Instantiate one converter per concrete method."""
    shared = {"encode": settings.encode, "tools": settings.tools}
    return {
        ConversionMethod.DIRECT: DirectConverter(config=settings.direct, **shared),
        ConversionMethod.EXTRACT: ExtractConverter(config=settings.extract, **shared),
    }


def plan_methods(method: ConversionMethod) -> list[ConversionMethod]:
    """Converters to try, in order. Only ``auto`` has a second entry."""
    if method == ConversionMethod.AUTO:
        return [ConversionMethod.DIRECT, ConversionMethod.EXTRACT]
    return [method]


def run_conversion(
    request: ConversionRequest,
    settings: AppSettings | None = None,
    converters: dict[ConversionMethod, BaseConverter] | None = None,
) -> StrategyOutcome:
    """Convert ``request`` and return a tagged outcome.

    Each planned converter runs at most once; the first success wins and
    later converters are never invoked.
    """
    if not request.input_path.is_file():
        error = InputNotFoundError(f"input file does not exist: {request.input_path}")
        return StrategyOutcome(
            request=request,
            failures=[ConversionOutcome(method=request.method, error=error)],
        )

    if converters is None:
        converters = build_converters(settings or AppSettings())

    failures: list[ConversionOutcome] = []
    for method in plan_methods(request.method):
        if failures:
            logger.info(
                f"{failures[-1].method.value} conversion failed, trying {method.value}: "
                f"{failures[-1].error}"
            )
        outcome = converters[method].attempt(request)
        if outcome.succeeded:
            return StrategyOutcome(request=request, output=outcome.output, failures=failures)
        failures.append(outcome)

    return StrategyOutcome(request=request, failures=failures)
