"""Shared pytest fixtures for Colourado tests."""

import pytest
import numpy as np
from pathlib import Path
import tempfile
from typing import Dict, Any


# =============================================================================
# Random Source Fixtures
# =============================================================================

@pytest.fixture
def rng():
    """Seeded random generator so palette draws are reproducible."""
    return np.random.default_rng(42)


@pytest.fixture
def fixed_seeds():
    """Starting (hue, saturation, value) points, one inside each type's seed range."""
    return {
        'random': (15.0, 0.75, 0.6),
        'pastel': (210.0, 0.25, 0.85),
        'dark': (300.0, 0.8, 0.2),
    }


# =============================================================================
# File System Fixtures
# =============================================================================

@pytest.fixture
def temp_output_dir():
    """Create temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


# =============================================================================
# Configuration Fixtures
# =============================================================================

@pytest.fixture
def clean_env(monkeypatch):
    """Remove COLOURADO_* variables so tests see only what they set."""
    for var in ('COLOURADO_COUNT', 'COLOURADO_TYPE',
                'COLOURADO_ADJACENT', 'COLOURADO_FORMAT'):
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


@pytest.fixture
def sample_config() -> Dict[str, Any]:
    """Sample configuration dictionary."""
    return {
        'palette': {
            'count': 6,
            'type': 'pastel',
            'adjacent': True,
        },
        'preview': {
            'format': 'hex',
        },
    }


@pytest.fixture
def temp_config_file(temp_output_dir, sample_config):
    """Create a temporary config YAML file."""
    import yaml
    config_path = temp_output_dir / "config.yaml"
    with open(config_path, 'w') as f:
        yaml.dump(sample_config, f)
    return config_path


# =============================================================================
# Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: mark test as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "benchmark: mark test as a performance benchmark"
    )


@pytest.fixture(autouse=True, scope="session")
def status_logger():
    """Create the shared status logger before any CLI test swaps out stderr."""
    from colourado.core.logging_utils import get_logger
    return get_logger()
