"""Pytest configuration for the Tempolex test suite.

Hypothesis profiles (max_examples set here only):
- dev: Local development, 200 examples
- ci: CI runs, 50 examples, derandomized
- verbose: Debug mode with progress output, 100 examples

Profile auto-detection:
- HYPOTHESIS_PROFILE env var -> explicit override
- CI=true environment variable -> "ci" profile
- Otherwise -> "dev" profile

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/

Tests marked @pytest.mark.fuzz are skipped unless requested with -m fuzz.

Every test starts with empty locale, formatter, name and template caches so
cache-size assertions and fallback logging do not depend on test order.
"""

import os
from collections.abc import Iterator

import pytest
from hypothesis import HealthCheck, Phase, Verbosity, settings

from tempolex.parsing import clear_template_caches
from tempolex.runtime import LocaleContext, clear_formatter_cache, clear_name_caches

# =============================================================================
# HYPOTHESIS PROFILES
# =============================================================================

_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]

# Name tables are rendered through Babel on first use per locale, which makes
# the first example of a run slow. Cache isolation is an autouse fixture and
# runs once per test, not once per example.
_SUPPRESSED = [HealthCheck.too_slow, HealthCheck.function_scoped_fixture]

settings.register_profile(
    "dev",
    max_examples=200,
    phases=_PHASES,
    suppress_health_check=_SUPPRESSED,
    deadline=None,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=_PHASES,
    suppress_health_check=_SUPPRESSED,
    deadline=None,
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=_PHASES,
    suppress_health_check=_SUPPRESSED,
    deadline=None,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Pick the Hypothesis profile for this run.

    Priority:
    1. HYPOTHESIS_PROFILE env var
    2. CI=true env var
    3. "dev"
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FUZZ MARKER
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker for intensive property tests."""
    config.addinivalue_line(
        "markers",
        "fuzz: Intensive property tests (excluded from normal test runs)",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip fuzz-marked tests unless the run selects them with -m fuzz."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return

    skip_fuzz = pytest.mark.skip(reason="Fuzz test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


# =============================================================================
# CACHE ISOLATION
# =============================================================================


def _clear_all_caches() -> None:
    clear_template_caches()
    clear_name_caches()
    clear_formatter_cache()
    LocaleContext.clear_cache()


@pytest.fixture(autouse=True)
def _isolated_caches() -> Iterator[None]:
    """Run every test against empty process-wide caches."""
    _clear_all_caches()
    yield
    _clear_all_caches()


@pytest.fixture
def en_us() -> LocaleContext:
    """Resolved en-US context."""
    return LocaleContext.create("en-US")


@pytest.fixture
def fr_fr() -> LocaleContext:
    """Resolved fr-FR context."""
    return LocaleContext.create("fr-FR")
