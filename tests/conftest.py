from __future__ import annotations

import pytest

# Markers each verification level leaves out.
_SKIPPED_MARKERS = {
    "fast": ("full", "slow"),
    "standard": ("full",),
    "full": (),
}
_SKIP_REASONS = {
    "full": "requires --verification-level=full",
    "slow": "skipped in fast verification level",
}


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--verification-level",
        action="store",
        default="standard",
        choices=tuple(_SKIPPED_MARKERS),
        help=(
            "How much of the i256 sweep to run: "
            "fast (edge cases only), "
            "standard (adds seeded random sweeps), "
            "full (adds exhaustive small-magnitude sweeps)."
        ),
    )


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers", "slow: seeded random i256 sweeps, skipped when fast"
    )
    config.addinivalue_line(
        "markers", "full: exhaustive i256 sweeps, run only when full"
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    skipped = _SKIPPED_MARKERS[config.getoption("--verification-level")]
    for item in items:
        for marker in skipped:
            if marker in item.keywords:
                item.add_marker(pytest.mark.skip(reason=_SKIP_REASONS[marker]))
                break
