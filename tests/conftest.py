"""Shared fixtures for the sync pipeline tests."""
import pytest

from src.domain.entities.secret import RunConfig
from tests.helpers import FILENAME_TAG, NAMESPACE_TAG, SECRET_NAME_TAG


@pytest.fixture
def run_config():
    return RunConfig(
        namespace_tag=NAMESPACE_TAG,
        secret_name_tag=SECRET_NAME_TAG,
        filename_tag=FILENAME_TAG,
    )
