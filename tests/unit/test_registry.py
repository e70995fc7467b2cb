"""Unit tests for the shared player registry, including concurrent access."""

import threading
from decimal import Decimal

import pytest

from croupier.table import BetIntake, Player, PlayerRegistry, resolve


def test_registry_keeps_roster_order(registry):
    assert registry.names == ["Alice", "Bob", "Carol"]
    assert [p.name for p in registry] == ["Alice", "Bob", "Carol"]
    assert len(registry) == 3
    assert "Bob" in registry
    assert "bob" not in registry


def test_registry_rejects_duplicate_names():
    with pytest.raises(ValueError):
        PlayerRegistry([Player(name="Alice"), Player(name="Alice")])


def test_empty_registry_is_falsy():
    assert not PlayerRegistry()


def test_totals_snapshot_is_detached(registry):
    snapshot = registry.totals()

    BetIntake(registry).place("Alice", "odd", "1")
    resolve(registry, 1)

    assert snapshot[0].total_won == Decimal("0")
    assert registry.totals()[0].total_won == Decimal("2")


def test_place_waits_for_resolution_pass(registry):
    intake = BetIntake(registry)
    intake.place("Alice", "odd", "1")
    placed = threading.Event()

    def place_late():
        intake.place("Bob", "even", "1")
        placed.set()

    with registry.lock:
        worker = threading.Thread(target=place_late)
        worker.start()
        # Blocked on the lock held by this "pass"
        assert not placed.wait(0.2)
        report = resolve(registry, 1)

    worker.join(timeout=5)
    assert placed.is_set()
    assert [r.player for r in report.results] == ["Alice"]
    assert registry.get("Bob").bets[0].amount == Decimal("1")


def test_concurrent_places_are_never_lost_or_duplicated(registry):
    intake = BetIntake(registry)
    names = registry.names
    per_thread = 200
    start = threading.Barrier(len(names) + 1)

    def place_many(name):
        start.wait()
        for _ in range(per_thread):
            intake.place(name, "even", "1")

    threads = [threading.Thread(target=place_many, args=(name,)) for name in names]
    for thread in threads:
        thread.start()

    start.wait()
    reports = [resolve(registry, 2, round_number=1)]
    for thread in threads:
        thread.join(timeout=10)
    reports.append(resolve(registry, 2, round_number=2))

    settled = sum(len(report.results) for report in reports)
    assert settled == per_thread * len(names)
    assert registry.pending_count() == 0

    total_wagered = sum((p.total_wagered for p in registry), Decimal("0"))
    # Carol starts with 7.5 already wagered
    assert total_wagered == Decimal(per_thread * len(names)) + Decimal("7.5")
