"""Unit tests for claims and payout arithmetic."""

import pytest

from frontline.engine import (
    AlreadyClaimed,
    InvalidFeeRate,
    RoundStillOpen,
    claim,
    close_round,
    compute_points,
    create_player_round,
)


@pytest.fixture
def settled(open_rnd, place):
    """Closed round with a vault of 1000 and a player holding 600 points."""
    alice = place(open_rnd, "alice", a=10, b=10, c=10)
    for i in range(4):
        place(open_rnd, f"p{i}", a=1, b=1, c=1)
    # Top the vault up to 1000 without touching participant counts
    open_rnd.vault = 1000
    close_round(open_rnd)
    compute_points(open_rnd, alice)
    assert alice.points == 600
    return open_rnd, alice


def test_first_claimant_takes_remainder(settled, events) -> None:
    rnd, alice = settled

    receipt = claim(rnd, alice, 500, caller="keeper", events=events)

    assert receipt.fee == 50
    assert receipt.caller == "keeper"
    assert receipt.reward == 950
    assert receipt.player == "alice"
    assert receipt.total == 1000
    assert rnd.vault == 0
    assert alice.claimed is True

    (event,) = events.of_kind("claimed")
    assert (event.round_index, event.player, event.reward) == (1, "alice", 950)


def test_uses_total_points_when_set(settled) -> None:
    rnd, alice = settled
    rnd.total_points = 1200

    receipt = claim(rnd, alice, 500, caller="alice")

    assert receipt.fee == 50
    assert receipt.reward == 475
    assert rnd.vault == 475


def test_claim_twice_fails(settled) -> None:
    rnd, alice = settled
    claim(rnd, alice, 500, caller="alice")

    with pytest.raises(AlreadyClaimed):
        claim(rnd, alice, 500, caller="alice")

    assert alice.claimed is True


def test_claim_on_open_round_fails(open_rnd, place, events) -> None:
    alice = place(open_rnd, "alice", a=100)
    alice.points = 600

    with pytest.raises(RoundStillOpen):
        claim(open_rnd, alice, 500, caller="alice", events=events)

    assert open_rnd.vault == 100
    assert alice.claimed is False
    assert events.of_kind("claimed") == []


def test_zero_points_claims_nothing(settled, events) -> None:
    rnd, _ = settled
    idle = create_player_round(rnd, "idle")

    receipt = claim(rnd, idle, 500, caller="idle", events=events)

    assert (receipt.fee, receipt.reward) == (0, 0)
    assert idle.claimed is True
    assert rnd.vault == 1000
    assert events.events == []


def test_empty_vault_claims_nothing(settled) -> None:
    rnd, alice = settled
    rnd.vault = 0

    receipt = claim(rnd, alice, 500, caller="alice")

    assert (receipt.fee, receipt.reward) == (0, 0)
    assert alice.claimed is True


def test_later_claimant_finds_vault_drained(settled) -> None:
    rnd, alice = settled
    claim(rnd, alice, 500, caller="alice")

    bob = create_player_round(rnd, "p0")
    bob.a_amount = bob.b_amount = bob.c_amount = 1
    compute_points(rnd, bob)

    receipt = claim(rnd, bob, 500, caller="p0")
    assert receipt.reward == 0
    assert bob.claimed is True


@pytest.mark.parametrize("fee_bps", [-1, 10_001])
def test_fee_rate_out_of_range(settled, fee_bps) -> None:
    rnd, alice = settled

    with pytest.raises(InvalidFeeRate):
        claim(rnd, alice, fee_bps, caller="alice")

    assert alice.claimed is False
    assert rnd.vault == 1000


def test_open_round_reported_before_fee_rate(open_rnd, place) -> None:
    alice = place(open_rnd, "alice", a=100)
    alice.points = 600

    with pytest.raises(RoundStillOpen):
        claim(open_rnd, alice, 10_001, caller="alice")


def test_repeat_claim_reported_before_fee_rate(settled) -> None:
    rnd, alice = settled
    claim(rnd, alice, 500, caller="alice")

    with pytest.raises(AlreadyClaimed):
        claim(rnd, alice, -1, caller="alice")


def test_full_fee_leaves_no_reward(settled) -> None:
    rnd, alice = settled

    receipt = claim(rnd, alice, 10_000, caller="keeper")

    assert receipt.fee == 1000
    assert receipt.reward == 0
    assert rnd.vault == 0
