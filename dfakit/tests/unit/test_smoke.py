"""
Smoke test: verify dfakit package is importable and has correct version.
"""

import dfakit


def test_version():
    """Test that dfakit package exports __version__ correctly."""
    assert dfakit.__version__ == "0.1.0"


def test_public_names_exported():
    """Names listed in __all__ resolve on the package."""
    for name in dfakit.__all__:
        assert hasattr(dfakit, name), name
