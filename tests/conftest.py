"""Shared pytest setup: Hypothesis profiles and the fuzz marker.

A shorthand value is a handful of keyword slots, a size and a short family
list, so the strategies in tests/strategies reach every parser state within
a couple of hundred examples. Profiles:

- dev (default): 200 examples
- ci: 50 examples, derandomized so a red build reproduces locally
- verbose: 50 examples with Hypothesis progress output

Selection: HYPOTHESIS_PROFILE wins, then CI=true picks "ci", else "dev".

    HYPOTHESIS_PROFILE=verbose pytest tests/test_syntax_serializer.py

Tests marked ``fuzz`` (tests/fuzz/) are skipped unless requested with
``pytest -m fuzz`` or by naming the fuzz directory on the command line.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

_PHASES = (Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink)
_PROFILES = ("dev", "ci", "verbose")

settings.register_profile("dev", max_examples=200, phases=_PHASES)
settings.register_profile(
    "ci",
    max_examples=50,
    phases=_PHASES,
    derandomize=True,
    print_blob=True,
)
settings.register_profile(
    "verbose",
    max_examples=50,
    phases=_PHASES,
    verbosity=Verbosity.verbose,
)


def _select_profile() -> str:
    requested = os.environ.get("HYPOTHESIS_PROFILE")
    if requested in _PROFILES:
        return requested
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_select_profile())


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "fuzz: long-running parser properties, skipped unless selected with -m fuzz",
    )


def _fuzz_requested(config: pytest.Config) -> bool:
    if "fuzz" in str(config.getoption("-m", default="")):
        return True
    return any(
        "fuzz" in str(arg).replace("\\", "/").split("/")
        for arg in config.invocation_params.args
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests in ordinary runs."""
    if _fuzz_requested(config):
        return

    skip = pytest.mark.skip(reason="fuzz property; run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip)
