import pytest

from blogseed.adapters import ConnectionConfig, SQLiteAdapter


@pytest.fixture
def sqlite_adapter(tmp_path):
    adapter = SQLiteAdapter()
    adapter.connect(ConnectionConfig(url=f"sqlite:///{tmp_path / 'blog.db'}"))
    yield adapter
    adapter.close()
