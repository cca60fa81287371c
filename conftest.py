"""Global test configuration and shared fixtures."""

from __future__ import annotations

import typing as t

import pytest
from hypothesis import HealthCheck, settings

import filenorm.platform
from filenorm.platform import PathStyle

settings.register_profile(
    "filenorm",
    max_examples=300,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)
settings.load_profile("filenorm")


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "system_style(name): run the test with the given system path style",
    )


@pytest.fixture(autouse=True)
def pinned_system_style(
    request: pytest.FixtureRequest, monkeypatch: pytest.MonkeyPatch
) -> t.Generator[PathStyle, None, None]:
    """Pin the process-wide style so results never depend on the host.

    Tests default to Unix conventions; ``@pytest.mark.system_style("WINDOWS")``
    switches a single test to Windows conventions.
    """
    marker = request.node.get_closest_marker("system_style")
    style = PathStyle[marker.args[0]] if marker else PathStyle.UNIX
    monkeypatch.setattr(filenorm.platform, "SYSTEM_STYLE", style)
    yield style
