"""Process-wide default dataset.

The default dataset is loaded once, on first use, and never changes
afterwards. Loading is serialized by a lock with a double check, so
concurrent first calls trigger exactly one load.

Loader selection on first use:
    1. The loader registered with configure_default_dataset(), if any
    2. load_dataset($CLDRFACTS_DATASET), if the variable is set
    3. build_babel_dataset(DEFAULT_BABEL_LOCALES)

A failed load raises DatasetLoadError and leaves nothing cached; the next
call tries again.

Python 3.13+.
"""

from __future__ import annotations

import logging
import os
from threading import RLock
from typing import ClassVar

from cldrfacts.constants import DATASET_ENV_VAR, DEFAULT_BABEL_LOCALES
from cldrfacts.data.babel_source import build_babel_dataset
from cldrfacts.data.loading import DatasetLoader, load_dataset
from cldrfacts.data.model import Dataset
from cldrfacts.diagnostics import ErrorTemplate, InvalidArgumentError

__all__ = [
    "configure_default_dataset",
    "get_default_dataset",
    "is_default_dataset_loaded",
    "reset_default_dataset",
]

logger = logging.getLogger(__name__)


def _load_from_environment() -> Dataset:
    path = os.environ.get(DATASET_ENV_VAR, "").strip()
    if path:
        logger.info("Loading default dataset from %s=%s", DATASET_ENV_VAR, path)
        return load_dataset(path)
    logger.info("Building default dataset from Babel for %d locales", len(DEFAULT_BABEL_LOCALES))
    return build_babel_dataset(DEFAULT_BABEL_LOCALES)


class _DefaultDataset:
    """Holder for the one default dataset and its loader."""

    _lock: ClassVar[RLock] = RLock()
    _dataset: ClassVar[Dataset | None] = None
    _loader: ClassVar[DatasetLoader | None] = None

    @classmethod
    def get(cls) -> Dataset:
        # Fast path once loaded
        dataset = cls._dataset
        if dataset is not None:
            return dataset
        with cls._lock:
            if cls._dataset is None:
                loader = cls._loader if cls._loader is not None else _load_from_environment
                cls._dataset = loader()
                logger.debug("Default dataset loaded")
            return cls._dataset

    @classmethod
    def configure(cls, loader: DatasetLoader) -> None:
        with cls._lock:
            if cls._dataset is not None:
                raise InvalidArgumentError(ErrorTemplate.default_dataset_loaded())
            cls._loader = loader

    @classmethod
    def reset(cls) -> None:
        with cls._lock:
            cls._dataset = None
            cls._loader = None

    @classmethod
    def is_loaded(cls) -> bool:
        return cls._dataset is not None


def get_default_dataset() -> Dataset:
    """Return the default dataset, loading it on first call.

    Thread-safe. Concurrent first calls share a single load.

    Raises:
        DatasetLoadError: If the configured source cannot be loaded
    """
    return _DefaultDataset.get()


def configure_default_dataset(loader: DatasetLoader) -> None:
    """Register the loader used for the default dataset.

    Must be called before the first get_default_dataset().

    Args:
        loader: Zero-argument callable returning a Dataset, e.g.
            ``functools.partial(load_dataset, "facts.json")``

    Raises:
        InvalidArgumentError: If the default dataset is already loaded

    Example:
        >>> from functools import partial
        >>> configure_default_dataset(partial(build_babel_dataset, ["en-US"]))
    """
    _DefaultDataset.configure(loader)
    logger.debug("Default dataset loader configured: %r", loader)


def reset_default_dataset() -> None:
    """Forget the default dataset and its loader.

    Teardown for tests. Datasets already handed out stay valid.
    """
    _DefaultDataset.reset()


def is_default_dataset_loaded() -> bool:
    """True once get_default_dataset() has loaded a dataset."""
    return _DefaultDataset.is_loaded()
