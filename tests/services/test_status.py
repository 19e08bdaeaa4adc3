"""Tests for MEL item / discrepancy status derivation."""

from __future__ import annotations

import pytest

from flightops.contracts.enums import ItemStatus
from flightops.services.status import derive_item_status

OPEN, DEFERRED, CLOSED = ItemStatus.OPEN, ItemStatus.DEFERRED, ItemStatus.CLOSED


class TestDeriveItemStatus:
    @pytest.mark.parametrize("prior", [None, OPEN, DEFERRED, CLOSED])
    @pytest.mark.parametrize("requested", [OPEN, DEFERRED, CLOSED])
    @pytest.mark.parametrize("is_deferred", [False, True])
    def test_requested_status_wins(self, prior, requested, is_deferred):
        decision = derive_item_status(requested, prior, is_deferred)
        assert decision.status == requested

    @pytest.mark.parametrize("is_deferred", [False, True])
    def test_closed_prior_stays_closed(self, is_deferred):
        decision = derive_item_status(None, CLOSED, is_deferred)
        assert decision.status == CLOSED
        assert decision.is_deferred is False

    @pytest.mark.parametrize("prior", [None, OPEN, DEFERRED])
    def test_deferred_flag_gives_deferred(self, prior):
        assert derive_item_status(None, prior, True) == (DEFERRED, True)

    @pytest.mark.parametrize("prior", [None, OPEN, DEFERRED])
    def test_default_is_open(self, prior):
        assert derive_item_status(None, prior, False) == (OPEN, False)

    @pytest.mark.parametrize("prior", [None, OPEN, DEFERRED, CLOSED])
    @pytest.mark.parametrize("requested", [None, OPEN, DEFERRED, CLOSED])
    @pytest.mark.parametrize("is_deferred", [False, True])
    def test_closed_never_deferred(self, prior, requested, is_deferred):
        decision = derive_item_status(requested, prior, is_deferred)
        if decision.status == CLOSED:
            assert decision.is_deferred is False

    def test_accepts_stored_strings(self):
        assert derive_item_status("Closed", "Open", True) == (CLOSED, False)
        assert derive_item_status(None, "Closed", False).status == CLOSED
