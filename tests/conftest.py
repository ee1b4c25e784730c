"""Shared fixtures for VOL tests."""

import pytest

from vol_builder import SAMPLE_ITEMS, build_vol


@pytest.fixture
def sample_archive() -> bytes:
    return build_vol(SAMPLE_ITEMS)


@pytest.fixture
def sample_path(tmp_path, sample_archive):
    path = tmp_path / "DRIVED.VOL"
    path.write_bytes(sample_archive)
    return path
