"""
Unit tests for shared-match intersection.
"""

import unittest

from squad_analytics.errors import InvalidInput
from squad_analytics.intersector import intersect_match_ids


class TestIntersectMatchIds(unittest.TestCase):
    """Test cases for intersect_match_ids."""

    def test_keeps_order_of_first_list(self):
        """Result follows the first player's match order."""
        result = intersect_match_ids([
            ["m5", "m3", "m1", "m2"],
            ["m1", "m2", "m3", "m4"],
        ])
        self.assertEqual(result, ["m3", "m1", "m2"])

    def test_membership_independent_of_list_order(self):
        """Reversing the lists changes at most the order, not the members."""
        lists = [
            ["m1", "m2", "m3", "m6"],
            ["m2", "m3", "m4", "m6"],
            ["m6", "m3", "m2", "m9"],
        ]
        forward = intersect_match_ids(lists)
        backward = intersect_match_ids(list(reversed(lists)))
        self.assertEqual(set(forward), set(backward))
        self.assertEqual(set(forward), {"m2", "m3", "m6"})

    def test_single_player_returns_full_list(self):
        """Intersecting one history gives that history."""
        history = ["m9", "m4", "m7"]
        self.assertEqual(intersect_match_ids([history]), history)

    def test_player_without_matches_gives_empty_result(self):
        """A player with no recent matches leaves nothing in common."""
        self.assertEqual(intersect_match_ids([["m1", "m2"], []]), [])
        self.assertEqual(intersect_match_ids([[], ["m1"]]), [])

    def test_disjoint_histories(self):
        """Disjoint histories have no shared matches."""
        self.assertEqual(intersect_match_ids([["m1"], ["m2"]]), [])

    def test_duplicates_in_first_list_kept_once(self):
        """Repeated ids in the first list are reported once."""
        self.assertEqual(intersect_match_ids([["m1", "m1", "m2"], ["m1", "m2"]]), ["m1", "m2"])

    def test_single_list_keeps_duplicates(self):
        """A lone history is returned as is, repeats included."""
        self.assertEqual(intersect_match_ids([["m1", "m1", "m2"]]), ["m1", "m1", "m2"])

    def test_empty_roster_rejected(self):
        """An empty roster is invalid input."""
        with self.assertRaises(InvalidInput):
            intersect_match_ids([])

    def test_accepts_tuples(self):
        """Player match ids are stored as tuples."""
        self.assertEqual(intersect_match_ids([("m1", "m2"), ("m2",)]), ["m2"])


if __name__ == "__main__":
    unittest.main()
