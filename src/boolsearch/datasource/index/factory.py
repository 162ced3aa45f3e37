from typing import Any, Type

from loguru import logger

from boolsearch.config.settings import Settings, settings
from boolsearch.datasource.index.base import BaseTermIndex
from boolsearch.datasource.index.duckdb import DuckDBTermIndex
from boolsearch.datasource.index.in_memory import InMemoryTermIndex
from boolsearch.datasource.index.sqlite import SQLiteTermIndex
from boolsearch.errors import ConfigurationError


class TermIndexFactory:
    """
    Factory for creating Term Index instances based on backend type.
    """

    _registry: dict[str, Type[BaseTermIndex]] = {
        "memory": InMemoryTermIndex,
        "sqlite": SQLiteTermIndex,
        "duckdb": DuckDBTermIndex,
    }

    @classmethod
    def create(
        cls,
        type_name: str | None = None,
        config: Settings | None = None,
        **params: Any,
    ) -> BaseTermIndex:
        """
        Create a term index instance.

        Args:
            type_name: Backend identifier ("memory", "sqlite", "duckdb").
                       Defaults to config.INDEX_BACKEND.
            config: Settings supplying the backend and default paths.
                    Defaults to the process-wide settings.
            **params: Additional constructor parameters
        """
        config = config or settings
        if not type_name:
            type_name = config.INDEX_BACKEND

        type_name = type_name.lower()
        if type_name not in cls._registry:
            available = ", ".join(cls._registry.keys())
            raise ConfigurationError(
                f"Unknown Term Index Type: '{type_name}'. Available types: {available}",
                details={"type_name": type_name},
            )

        index_class = cls._registry[type_name]

        # Inject default paths if not provided
        if type_name == "sqlite" and "db_path" not in params:
            params["db_path"] = config.SQLITE_PATH

        if type_name == "duckdb" and "database_path" not in params:
            params["database_path"] = config.DUCKDB_PATH

        logger.debug(f"Creating {index_class.__name__} with params: {params}")
        return index_class(**params)

    @classmethod
    def register(cls, type_name: str, index_class: Type[BaseTermIndex]) -> None:
        """Register a custom term index backend."""
        if not issubclass(index_class, BaseTermIndex):
            raise TypeError(f"{index_class.__name__} must inherit from BaseTermIndex")
        cls._registry[type_name.lower()] = index_class
        logger.info(f"Registered term index type '{type_name}': {index_class.__name__}")

    @classmethod
    def list_types(cls) -> list[str]:
        return list(cls._registry.keys())
