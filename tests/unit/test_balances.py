import pytest

from splitledger.core.balances import (
    compute_balances_by_currency,
    compute_member_balance,
    compute_net_balances,
    summarize_spending,
)
from tests.ledger_builders import expense, settlement


class TestComputeNetBalances:

    def test_members_without_activity_appear_at_zero(self, alice_bob_carol):
        balances = compute_net_balances(alice_bob_carol, [], [])
        assert balances == {1: 0.0, 2: 0.0, 3: 0.0}

    def test_keeps_member_order(self):
        balances = compute_net_balances([3, 1, 2], [expense(1, 30, [1, 2, 3])], [])
        assert list(balances) == [3, 1, 2]

    def test_single_expense_split_between_two(self):
        balances = compute_net_balances([1, 2], [expense(1, 100, [1, 2])], [])
        assert balances == {1: 50.0, 2: -50.0}

    def test_three_way_split(self, alice_bob_carol):
        balances = compute_net_balances(alice_bob_carol, [expense(1, 90, [1, 2, 3])], [])
        assert balances == {1: 60.0, 2: -30.0, 3: -30.0}

    def test_payer_outside_participants(self, alice_bob_carol):
        balances = compute_net_balances(alice_bob_carol, [expense(1, 60, [2, 3])], [])
        assert balances == {1: 60.0, 2: -30.0, 3: -30.0}

    def test_uneven_division_is_not_pre_rounded(self, alice_bob_carol):
        balances = compute_net_balances(alice_bob_carol, [expense(1, 100, [1, 2, 3])], [])
        assert balances[2] == pytest.approx(-100 / 3)
        assert balances[1] == pytest.approx(200 / 3)

    def test_settlement_moves_payer_towards_zero(self):
        balances = compute_net_balances(
            [1, 2],
            [expense(1, 100, [1, 2])],
            [settlement(2, 1, 50)],
        )
        assert balances[1] == pytest.approx(0.0)
        assert balances[2] == pytest.approx(0.0)

    def test_partial_settlement(self):
        balances = compute_net_balances(
            [1, 2],
            [expense(1, 100, [1, 2])],
            [settlement(2, 1, 20)],
        )
        assert balances == {1: 30.0, 2: -30.0}

    def test_overpayment_flips_sign(self):
        balances = compute_net_balances([1, 2], [], [settlement(2, 1, 10)])
        assert balances == {1: -10.0, 2: 10.0}

    def test_entry_order_does_not_matter(self, alice_bob_carol):
        expenses = [expense(1, 90, [1, 2, 3]), expense(2, 45.5, [2, 3]), expense(3, 10, [1])]
        settlements = [settlement(2, 1, 12.25), settlement(3, 1, 4)]

        forward = compute_net_balances(alice_bob_carol, expenses, settlements)
        backward = compute_net_balances(alice_bob_carol, expenses[::-1], settlements[::-1])

        for uid in alice_bob_carol:
            assert forward[uid] == pytest.approx(backward[uid], abs=1e-9)

    def test_does_not_mutate_inputs(self, alice_bob_carol):
        members = list(alice_bob_carol)
        expenses = [expense(1, 90, [1, 2, 3])]
        compute_net_balances(members, expenses, [])
        assert members == [1, 2, 3]
        assert expenses == [expense(1, 90, [1, 2, 3])]


class TestComputeMemberBalance:

    def test_matches_group_map(self, alice_bob_carol):
        expenses = [expense(1, 90, [1, 2, 3]), expense(2, 40, [1, 2])]
        settlements = [settlement(3, 1, 30)]
        group = compute_net_balances(alice_bob_carol, expenses, settlements)

        for uid in alice_bob_carol:
            assert compute_member_balance(uid, expenses, settlements) == pytest.approx(group[uid])

    def test_member_without_entries(self):
        assert compute_member_balance(9, [expense(1, 10, [1, 2])], [settlement(2, 1, 5)]) == 0.0

    def test_payer_who_also_participates(self):
        assert compute_member_balance(1, [expense(1, 100, [1, 2])], []) == 50.0


class TestBalancesByCurrency:

    def test_scopes_are_folded_separately(self, alice_bob_carol):
        expenses = [
            expense(1, 90, [1, 2, 3], currency="INR"),
            expense(2, 20, [1, 2], currency="USD"),
        ]
        scoped = compute_balances_by_currency(alice_bob_carol, expenses, [], default_currency="INR")

        assert list(scoped) == ["INR", "USD"]
        assert scoped["INR"] == {1: 60.0, 2: -30.0, 3: -30.0}
        assert scoped["USD"] == {1: -10.0, 2: 10.0, 3: 0.0}

    def test_entries_without_currency_use_default(self, alice_bob_carol):
        scoped = compute_balances_by_currency(
            alice_bob_carol,
            [expense(1, 30, [1, 2, 3])],
            [settlement(2, 1, 10, currency="EUR")],
            default_currency="INR",
        )
        assert list(scoped) == ["INR", "EUR"]
        assert scoped["INR"][1] == 20.0
        assert scoped["EUR"] == {1: -10.0, 2: 10.0, 3: 0.0}

    def test_empty_ledger_has_no_scopes(self, alice_bob_carol):
        assert compute_balances_by_currency(alice_bob_carol, [], [], default_currency="INR") == {}


class TestSummarizeSpending:

    def test_paid_share_and_balance(self, alice_bob_carol):
        summary = summarize_spending(
            alice_bob_carol,
            [expense(1, 90, [1, 2, 3]), expense(2, 30, [2, 3])],
        )

        assert summary.total_spending == 120.0
        rows = {m.member_id: m for m in summary.members}
        assert (rows[1].paid, rows[1].share, rows[1].balance) == (90.0, 30.0, 60.0)
        assert (rows[2].paid, rows[2].share, rows[2].balance) == (30.0, 45.0, -15.0)
        assert (rows[3].paid, rows[3].share, rows[3].balance) == (0.0, 45.0, -45.0)

    def test_idle_members_listed(self, alice_bob_carol):
        summary = summarize_spending(alice_bob_carol, [])
        assert summary.total_spending == 0.0
        assert [m.member_id for m in summary.members] == [1, 2, 3]
        assert all(m.paid == m.share == m.balance == 0.0 for m in summary.members)
