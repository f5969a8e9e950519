"""Unit tests for the traced decorator."""

import pytest

from modelcdn.shared.telemetry.tracing import add_span_attributes, traced


async def test_traced_passes_result_through() -> None:
    @traced("test.op")
    async def op(value: int) -> int:
        add_span_attributes(size_bytes=value)
        return value * 2

    assert await op(21) == 42


async def test_traced_reraises() -> None:
    @traced()
    async def failing() -> None:
        raise ValueError("boom")

    with pytest.raises(ValueError, match="boom"):
        await failing()


def test_traced_rejects_sync_functions() -> None:
    with pytest.raises(TypeError):

        @traced("test.sync")
        def sync_op() -> None:
            return None
