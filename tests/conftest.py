"""Pytest configuration and fixtures for docstore tests."""

from __future__ import annotations

import itertools
import tempfile
from pathlib import Path
from typing import Callable, Generator

import pytest
from prometheus_client import CollectorRegistry

from docstore.adapters.outbound import FileCollectionStore, InMemoryCollectionStore
from docstore.application import CollectionHandle, QueryExecutor, collection
from docstore.domain.value_objects import DocumentId
from docstore.infrastructure.config import Config, StorageConfig
from docstore.infrastructure.container import Container, reset_container
from docstore.infrastructure.metrics import MetricsRegistry


def sequential_ids() -> Callable[[], DocumentId]:
    """Deterministic id factory: doc001, doc002, ..."""
    counter = itertools.count(1)
    return lambda: DocumentId(f"doc{next(counter):03d}")


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def test_config(temp_dir: Path) -> Config:
    """Provide a file-backed test configuration in a temporary directory."""
    return Config(
        storage=StorageConfig(
            backend="file",
            data_dir=temp_dir / "data",
        ),
    )


@pytest.fixture
def container() -> Generator[Container, None, None]:
    """Provide a fresh DI container for each test."""
    reset_container()
    c = Container()
    yield c
    c.clear()


@pytest.fixture
def metrics_registry() -> MetricsRegistry:
    """Provide a fresh metrics registry for each test."""
    # Use a separate registry to avoid conflicts between tests
    registry = CollectorRegistry(auto_describe=True)
    return MetricsRegistry(registry=registry)


@pytest.fixture
def memory_store() -> InMemoryCollectionStore:
    """Provide an in-memory store with predictable ids."""
    return InMemoryCollectionStore(id_factory=sequential_ids())


@pytest.fixture
def file_store(temp_dir: Path) -> FileCollectionStore:
    """Provide a file store rooted in a temporary directory."""
    return FileCollectionStore(temp_dir / "collections", id_factory=sequential_ids())


@pytest.fixture
def executor(
    memory_store: InMemoryCollectionStore, metrics_registry: MetricsRegistry
) -> QueryExecutor:
    """Provide an executor over the in-memory store."""
    return QueryExecutor(memory_store, metrics=metrics_registry)


@pytest.fixture
def people() -> CollectionHandle:
    """Handle for the 'people' collection."""
    return collection("people")


# Markers for test categories
def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests")
