from __future__ import annotations

from pathlib import Path

from pkgbin.domain.linking import LinkChange, plan_reconciliation

BIN = Path("/usr/local/bin")
X_BIN = Path("/global/node_modules/.bin")
Y_BIN = Path("/global/bower_components/.bin")


def test_install_adds_new_binary_only() -> None:
    before = frozenset({X_BIN / "foo"})
    after = frozenset({X_BIN / "foo", X_BIN / "bar"})

    plan = plan_reconciliation(before, after, bin_dir=BIN)

    assert plan.added == {X_BIN / "bar"}
    assert plan.removed == frozenset()
    assert plan.to_add == (LinkChange(source=X_BIN / "bar", destination=BIN / "bar"),)


def test_removal_plans_destination_by_basename() -> None:
    plan = plan_reconciliation(frozenset({X_BIN / "foo"}), frozenset(), bin_dir=BIN)

    assert plan.removed == {X_BIN / "foo"}
    assert plan.to_remove == (LinkChange(source=X_BIN / "foo", destination=BIN / "foo"),)
    assert plan.to_add == ()


def test_unchanged_snapshots_produce_empty_plan() -> None:
    snapshot = frozenset({X_BIN / "foo", Y_BIN / "bar"})

    plan = plan_reconciliation(snapshot, snapshot, bin_dir=BIN)

    assert plan.is_empty


def test_collision_prefers_last_registry_in_precedence() -> None:
    after = frozenset({X_BIN / "foo", Y_BIN / "foo"})

    plan = plan_reconciliation(frozenset(), after, bin_dir=BIN, precedence=(X_BIN, Y_BIN))
    reversed_plan = plan_reconciliation(
        frozenset(), after, bin_dir=BIN, precedence=(Y_BIN, X_BIN)
    )

    assert plan.to_add == (LinkChange(source=Y_BIN / "foo", destination=BIN / "foo"),)
    assert plan.shadowed == (LinkChange(source=X_BIN / "foo", destination=BIN / "foo"),)
    assert reversed_plan.to_add == (LinkChange(source=X_BIN / "foo", destination=BIN / "foo"),)
    assert plan.added == after
