from unittest.mock import MagicMock

import pytest

from hr_kb_seeder.config import Settings, get_settings


@pytest.fixture
def settings():
    return Settings(
        openai_api_key="sk-test-openai",
        pinecone_api_key="pc-test-pinecone",
        _env_file=None,
    )


@pytest.fixture
def mock_pc():
    """Pinecone client double with no existing indexes."""
    pc = MagicMock()
    pc.list_indexes.return_value.names.return_value = []
    return pc


@pytest.fixture
def mock_index(mock_pc):
    return mock_pc.Index.return_value


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
