"""
Tests for the box collection and lightest-box selection.
"""

import numpy as np
import pytest

from box_arena.core.config_loader import load_config
from box_arena.core.box_collection import BoxCollection
from box_arena.core.boxes import BoxKind, ScoringBox


BIG = 2.0 ** 53


@pytest.fixture
def config():
    return load_config()


@pytest.fixture
def collection(config):
    return BoxCollection(config)


class TestComposition:
    """Test the fixed arrangement."""

    def test_four_boxes(self, collection):
        assert len(collection) == 4

    def test_initial_weights(self, collection):
        assert collection.weights() == [0.0, 0.1, 0.2, 0.3]

    def test_kinds_by_index(self, collection):
        assert collection.kind_of(0) is BoxKind.MEAN_SQUARE
        assert collection.kind_of(1) is BoxKind.MEAN_SQUARE
        assert collection.kind_of(2) is BoxKind.PAIRING
        assert collection.kind_of(3) is BoxKind.PAIRING

    def test_kind_of_box(self, collection):
        for i, box in enumerate(collection):
            assert collection.kind_of(box) is collection.kind_of(i)

    def test_kind_of_numpy_index(self, collection):
        assert collection.kind_of(np.int64(1)) is BoxKind.MEAN_SQUARE
        assert collection.kind_of(np.int32(3)) is BoxKind.PAIRING

    def test_kind_of_rejects_bool(self, collection):
        with pytest.raises(ValueError):
            collection.kind_of(True)

    def test_kind_of_foreign_box(self, collection):
        with pytest.raises(ValueError):
            collection.kind_of(ScoringBox(BoxKind.PAIRING))

    def test_kind_of_invalid_index(self, collection):
        with pytest.raises(IndexError):
            collection.kind_of(4)

    def test_from_config(self, config):
        collection = BoxCollection.from_config(config)
        assert collection.weights() == [0.0, 0.1, 0.2, 0.3]


class TestLightest:
    """Test lightest-box selection."""

    def test_initial_lightest_is_first(self, collection):
        assert collection.lightest() is collection[0]
        assert collection.lightest_index() == 0

    def test_lightest_follows_weights(self, collection):
        collection[0].absorb(1)
        assert collection.lightest_index() == 1

        collection[1].absorb(1)
        assert collection.lightest_index() == 2

    def test_tie_goes_to_lowest_index(self, collection):
        """Equal weights: the earliest box in the arrangement wins."""
        # At 2**53 the float spacing is 2, so the fractional initial
        # weights round away and boxes 0 and 1 weigh exactly the same.
        collection[0].absorb(BIG)
        collection[1].absorb(BIG)
        collection[2].absorb(2 * BIG)
        collection[3].absorb(2 * BIG)
        assert collection[0].current_weight == collection[1].current_weight

        assert collection.lightest_index() == 0

    def test_exact_tie_is_stable(self, collection):
        """Repeated calls on unchanged state return the same box."""
        collection[0].absorb(2 * BIG)
        collection[1].absorb(2 * BIG)
        collection[2].absorb(BIG)
        collection[3].absorb(BIG)
        assert collection[2].current_weight == collection[3].current_weight

        first = collection.lightest()
        for _ in range(10):
            assert collection.lightest() is first
        assert first is collection[2]

    def test_all_equal_selects_first(self, collection):
        for box in collection:
            box.absorb(BIG)
        assert len(set(collection.weights())) == 1

        assert collection.lightest() is collection[0]

    def test_lightest_with_zero_weight_token(self, collection):
        """Absorbing 0 keeps the same box lightest."""
        collection[0].absorb(0)
        assert collection.lightest() is collection[0]
