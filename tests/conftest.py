"""Pytest configuration for the locbuild test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile (GitHub Actions sets this)
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from locbuild.loading import MemoryFileProvider

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var (GitHub Actions auto-detection)
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# SHARED FIXTURES
# =============================================================================


@pytest.fixture
def sample_manifest_json() -> dict[str, object]:
    """Core bundle manifest with one commented key and two bundles."""
    return {
        "keys": {
            "vs/platform/files/common/files": ["fileNotFound", {"key": "k2", "comment": ["c"]}],
            "vs/workbench/contrib/terminal/browser/terminal": ["terminal"],
        },
        "messages": {
            "vs/platform/files/common/files": ["File not found", "Second"],
            "vs/workbench/contrib/terminal/browser/terminal": ["Terminal"],
        },
        "bundles": {
            "vs/workbench/workbench.desktop.main": [
                "vs/platform/files/common/files",
                "vs/workbench/contrib/terminal/browser/terminal",
            ],
        },
    }


@pytest.fixture
def empty_provider() -> MemoryFileProvider:
    """Provider with no files at all."""
    return MemoryFileProvider()
