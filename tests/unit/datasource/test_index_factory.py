from unittest.mock import MagicMock, patch

import pytest

from boolsearch.config.settings import Settings
from boolsearch.datasource.index.base import BaseTermIndex
from boolsearch.datasource.index.factory import TermIndexFactory
from boolsearch.datasource.index.in_memory import InMemoryTermIndex
from boolsearch.errors import ConfigurationError


class TestTermIndexFactory:

    @patch("boolsearch.datasource.index.factory.settings")
    def test_default_backend_from_settings(self, mock_settings):
        mock_settings.INDEX_BACKEND = "memory"
        index = TermIndexFactory.create()
        assert isinstance(index, InMemoryTermIndex)

    @patch("boolsearch.datasource.index.factory.settings")
    def test_sqlite_default_path_injected(self, mock_settings):
        mock_settings.SQLITE_PATH = "/tmp/terms.db"
        mock_cls = MagicMock(__name__="SQLiteTermIndex")
        with patch.dict(TermIndexFactory._registry, {"sqlite": mock_cls}):
            TermIndexFactory.create("sqlite")
        mock_cls.assert_called_with(db_path="/tmp/terms.db")

    @patch("boolsearch.datasource.index.factory.settings")
    def test_explicit_path_wins(self, mock_settings, tmp_path):
        mock_settings.SQLITE_PATH = "/should/not/be/used.db"
        index = TermIndexFactory.create("SQLite", db_path=str(tmp_path / "explicit.db"))
        try:
            assert index.db_path == str(tmp_path / "explicit.db")
        finally:
            index.close()

    @patch("boolsearch.datasource.index.factory.settings")
    def test_config_overrides_global_settings(self, mock_settings, tmp_path):
        mock_settings.INDEX_BACKEND = "memory"
        mock_settings.SQLITE_PATH = "/should/not/be/used.db"
        config = Settings(INDEX_BACKEND="sqlite", SQLITE_PATH=str(tmp_path / "config.db"))

        index = TermIndexFactory.create(config=config)
        try:
            assert index.db_path == str(tmp_path / "config.db")
            assert (tmp_path / "config.db").exists()
        finally:
            index.close()

    def test_config_duckdb_path(self, tmp_path):
        mock_cls = MagicMock(__name__="DuckDBTermIndex")
        config = Settings(DUCKDB_PATH=str(tmp_path / "terms.duckdb"))
        with patch.dict(TermIndexFactory._registry, {"duckdb": mock_cls}):
            TermIndexFactory.create("duckdb", config=config)
        mock_cls.assert_called_with(database_path=str(tmp_path / "terms.duckdb"))

    def test_unknown_backend(self):
        with pytest.raises(ConfigurationError, match="Unknown Term Index Type"):
            TermIndexFactory.create("redis")

    def test_register_custom_backend(self):
        class DictIndex(InMemoryTermIndex):
            pass

        with patch.dict(TermIndexFactory._registry):
            TermIndexFactory.register("dict", DictIndex)
            assert "dict" in TermIndexFactory.list_types()
            assert isinstance(TermIndexFactory.create("dict"), DictIndex)
        assert "dict" not in TermIndexFactory.list_types()

    def test_register_rejects_non_index(self):
        with pytest.raises(TypeError):
            TermIndexFactory.register("bad", dict)

    def test_builtin_types(self):
        assert set(TermIndexFactory.list_types()) >= {"memory", "sqlite", "duckdb"}
        for index_class in TermIndexFactory._registry.values():
            assert issubclass(index_class, BaseTermIndex)
