"""Tests for shared contracts: dimensions, requests, tagged outcomes."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from anim2mp4.core.contracts import (
    ConversionMethod,
    ConversionOutcome,
    ConversionOutput,
    ConversionRequest,
    Dimensions,
    StrategyOutcome,
    default_output_path,
    make_even,
)
from anim2mp4.core.errors import FrameExtractionError, TranscodeFailedError


class TestEvenDimensions:
    @pytest.mark.parametrize("n,expected", [(1, 2), (2, 2), (99, 100), (100, 100), (1921, 1922)])
    def test_make_even_rounds_up(self, n, expected):
        assert make_even(n) == expected

    def test_odd_sides_grow_by_exactly_one(self):
        for w in range(1, 12):
            for h in range(1, 12):
                even = Dimensions(width=w, height=h).to_even()
                assert even.width % 2 == 0 and even.height % 2 == 0
                assert even.width - w in (0, 1)
                assert even.height - h in (0, 1)

    def test_even_dimensions_unchanged(self):
        dims = Dimensions(width=640, height=480)
        assert dims.is_even
        assert dims.to_even() == dims

    def test_is_even_false_for_one_odd_side(self):
        assert not Dimensions(width=640, height=481).is_even

    def test_rejects_zero(self):
        with pytest.raises(ValidationError):
            Dimensions(width=0, height=10)

    def test_str(self):
        assert str(Dimensions(width=3, height=5)) == "3x5"


class TestConversionRequest:
    def test_default_output_path(self):
        assert default_output_path(Path("clip.webp")) == Path("clip.mp4")
        assert default_output_path(Path("dir/anim.gif")) == Path("dir/anim.mp4")
        assert default_output_path(Path("noext")) == Path("noext.mp4")

    def test_for_input_defaults(self):
        req = ConversionRequest.for_input(Path("anim.webp"))
        assert req.output_path == Path("anim.mp4")
        assert req.fps == 30
        assert req.bitrate == "2M"
        assert req.verbose is False
        assert req.method == ConversionMethod.AUTO

    def test_explicit_output_kept(self):
        req = ConversionRequest.for_input(Path("anim.webp"), Path("out/video.mp4"))
        assert req.output_path == Path("out/video.mp4")

    def test_immutable(self):
        req = ConversionRequest.for_input(Path("anim.webp"))
        with pytest.raises(ValidationError):
            req.fps = 60

    def test_rejects_non_positive_fps(self):
        with pytest.raises(ValidationError):
            ConversionRequest.for_input(Path("anim.webp"), fps=0)

    def test_method_from_string(self):
        req = ConversionRequest.for_input(Path("anim.webp"), method="extract")
        assert req.method is ConversionMethod.EXTRACT


class TestOutcomes:
    def _request(self):
        return ConversionRequest.for_input(Path("anim.webp"))

    def test_conversion_outcome_tags(self):
        ok = ConversionOutcome(
            method=ConversionMethod.DIRECT,
            output=ConversionOutput(output_path=Path("a.mp4"), method=ConversionMethod.DIRECT),
        )
        bad = ConversionOutcome(method=ConversionMethod.DIRECT, error=TranscodeFailedError("x"))
        assert ok.succeeded
        assert not bad.succeeded

    def test_strategy_error_is_last_failure(self):
        first = ConversionOutcome(method=ConversionMethod.DIRECT, error=TranscodeFailedError("direct"))
        second = ConversionOutcome(method=ConversionMethod.EXTRACT, error=FrameExtractionError("extract"))
        outcome = StrategyOutcome(request=self._request(), failures=[first, second])
        assert not outcome.succeeded
        assert outcome.error is second.error

    def test_strategy_success_has_no_error(self):
        out = ConversionOutput(output_path=Path("a.mp4"), method=ConversionMethod.EXTRACT)
        first = ConversionOutcome(method=ConversionMethod.DIRECT, error=TranscodeFailedError("direct"))
        outcome = StrategyOutcome(request=self._request(), output=out, failures=[first])
        assert outcome.succeeded
        assert outcome.error is None
