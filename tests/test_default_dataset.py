"""Tests for the lazily loaded process-wide default dataset."""

from __future__ import annotations

import json
import threading
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest

from cldrfacts.constants import DATASET_ENV_VAR
from cldrfacts.data import Dataset, load_dataset
from cldrfacts.diagnostics import DatasetLoadError, DiagnosticCode, InvalidArgumentError
from cldrfacts.enums import Weekday
from cldrfacts.runtime import (
    LocaleFacts,
    configure_default_dataset,
    get_default_dataset,
    is_default_dataset_loaded,
    reset_default_dataset,
)

pytestmark = pytest.mark.usefixtures("clean_default_dataset")


class TestConfiguredLoader:
    """configure_default_dataset() controls the first load."""

    def test_loader_called_once(self) -> None:
        """The loader runs on first use and the result is cached."""
        calls: list[int] = []
        dataset = Dataset()

        def loader() -> Dataset:
            calls.append(1)
            return dataset

        configure_default_dataset(loader)
        assert not is_default_dataset_loaded()
        assert get_default_dataset() is dataset
        assert get_default_dataset() is dataset
        assert calls == [1]

    def test_configure_after_load_raises(self) -> None:
        """The loader is fixed once a dataset exists."""
        configure_default_dataset(Dataset)
        get_default_dataset()
        with pytest.raises(InvalidArgumentError) as exc_info:
            configure_default_dataset(Dataset)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.DEFAULT_DATASET_LOADED

    def test_reconfigure_before_load(self) -> None:
        """The last loader registered before the first load wins."""
        first, second = Dataset(), Dataset()
        configure_default_dataset(lambda: first)
        configure_default_dataset(lambda: second)
        assert get_default_dataset() is second

    def test_failed_load_is_not_cached(self) -> None:
        """A loader that raises leaves nothing behind; the next call retries."""
        attempts: list[int] = []
        dataset = Dataset()

        def flaky() -> Dataset:
            attempts.append(1)
            if len(attempts) == 1:
                raise DatasetLoadError("temporarily unavailable")
            return dataset

        configure_default_dataset(flaky)
        with pytest.raises(DatasetLoadError):
            get_default_dataset()
        assert not is_default_dataset_loaded()
        assert get_default_dataset() is dataset

    def test_reset_forgets_dataset_and_loader(self) -> None:
        """reset_default_dataset() returns to the unconfigured state."""
        configure_default_dataset(Dataset)
        get_default_dataset()
        reset_default_dataset()
        assert not is_default_dataset_loaded()
        configure_default_dataset(Dataset)


class TestConcurrentFirstUse:
    """Concurrent first calls share one load."""

    def test_single_load_under_contention(self) -> None:
        """Many threads racing on first use trigger exactly one load."""
        calls: list[int] = []
        gate = threading.Event()
        dataset = Dataset()

        def slow_loader() -> Dataset:
            calls.append(1)
            gate.wait(timeout=5)
            return dataset

        configure_default_dataset(slow_loader)
        with ThreadPoolExecutor(max_workers=8) as pool:
            futures = [pool.submit(get_default_dataset) for _ in range(16)]
            gate.set()
            results = [future.result(timeout=10) for future in futures]

        assert calls == [1]
        assert all(result is dataset for result in results)


class TestEnvironmentConfiguration:
    """Without a configured loader the environment decides."""

    def test_dataset_path_from_environment(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """CLDRFACTS_DATASET names a JSON file to load."""
        path = tmp_path / "facts.json"
        path.write_text(
            json.dumps({"first_days_of_week": [{"regions": ["001"], "value": "sat"}]}),
            encoding="utf-8",
        )
        monkeypatch.setenv(DATASET_ENV_VAR, str(path))
        assert LocaleFacts().first_day_of_week("EG") == (Weekday.SATURDAY, ())

    def test_bad_environment_path_raises(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """A missing file surfaces as DatasetLoadError on first use."""
        monkeypatch.setenv(DATASET_ENV_VAR, str(tmp_path / "missing.json"))
        with pytest.raises(DatasetLoadError):
            get_default_dataset()

    def test_babel_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """With nothing configured the Babel dataset is built."""
        monkeypatch.delenv(DATASET_ENV_VAR, raising=False)
        facts = LocaleFacts()
        assert facts.currency("en-US") == ("USD", ())
        assert facts.first_day_of_week("US") == (Weekday.SUNDAY, ())
        assert facts.plural_category("ru-RU", 22) == ("few", ())

    def test_partial_loader(self, tmp_path: Path) -> None:
        """functools.partial(load_dataset, path) is a valid loader."""
        from functools import partial

        path = tmp_path / "facts.json"
        path.write_text(json.dumps({}), encoding="utf-8")
        configure_default_dataset(partial(load_dataset, path))
        assert get_default_dataset().plural_rule_sets == ()
