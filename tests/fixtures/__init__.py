"""Test fixtures for the state registry tests."""

from tests.fixtures.records import (
    sample_state_payloads,
    sample_state_json,
    make_state_payload,
)

__all__ = [
    "sample_state_payloads",
    "sample_state_json",
    "make_state_payload",
]
