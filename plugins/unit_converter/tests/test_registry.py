import threading
import time

import pytest

from plugins.unit_converter.core import (
    ConfigurationError,
    LinearTransform,
    SwappedLinearTransform,
    TransformRegistry,
)
from plugins.unit_converter.core.catalog import (
    CELSIUS,
    FAHRENHEIT,
    GRAM,
    KELVIN,
    METER,
    POUND,
)


def test_registry_starts_empty_and_caches(registry):
    assert len(registry) == 0
    first = registry.get(GRAM, POUND)
    second = registry.get(GRAM, POUND)
    assert first is second
    assert len(registry) == 1
    assert (GRAM, POUND) in registry


def test_temperature_pairs_use_swapped_transform(registry):
    assert isinstance(registry.get(CELSIUS, FAHRENHEIT), SwappedLinearTransform)
    assert isinstance(registry.get(CELSIUS, KELVIN), SwappedLinearTransform)
    assert type(registry.get(GRAM, POUND)) is LinearTransform


def test_undeclared_pair_is_a_configuration_error(registry):
    with pytest.raises(ConfigurationError):
        registry.get(GRAM, METER)
    assert len(registry) == 0


def test_concurrent_first_access_builds_once():
    calls = []

    def slow_factory(primary, minor):
        calls.append((primary, minor))
        time.sleep(0.02)
        return LinearTransform(2.0)

    registry = TransformRegistry(factory=slow_factory)
    barrier = threading.Barrier(8)
    results = []
    results_lock = threading.Lock()

    def worker():
        barrier.wait()
        transform = registry.get(GRAM, POUND)
        with results_lock:
            results.append(transform)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert calls == [(GRAM, POUND)]
    assert len(results) == 8
    assert all(result is results[0] for result in results)
