"""
Tests for popularity tiers and the optimistic upvote toggle.
"""
from unittest.mock import patch

from django.test import SimpleTestCase

from products.exceptions import InvalidArgumentError, VoteTierConfigError
from products.milestone_constants import VOTE_BADGE_TIERS, get_category
from products.services.upvote_service import UpvoteState, toggle_upvote
from products.services.vote_badge_service import get_vote_tier, get_vote_tier_showcase


class VoteTierTest(SimpleTestCase):
    """Test get_vote_tier range lookup."""

    def test_tier_boundaries(self):
        expected = {
            0: 'Starter', 99: 'Starter',
            100: 'Rising', 299: 'Rising',
            300: 'Popular', 499: 'Popular',
            500: 'Trending', 999: 'Trending',
            1000: 'Viral', 4999: 'Viral',
            5000: 'Legend', 9999: 'Legend',
            10000: 'Epic', 2_000_000: 'Epic',
        }
        for count, name in expected.items():
            self.assertEqual(get_vote_tier(count)['name'], name, count)

    def test_returns_copy(self):
        tier = get_vote_tier(150)
        tier['name'] = 'Changed'
        self.assertEqual(VOTE_BADGE_TIERS[1]['name'], 'Rising')

    def test_tiers_are_contiguous(self):
        for lower, upper in zip(VOTE_BADGE_TIERS, VOTE_BADGE_TIERS[1:]):
            self.assertEqual(lower['max'] + 1, upper['min'])
        self.assertIsNone(VOTE_BADGE_TIERS[-1]['max'])

    def test_showcase_covers_every_tier(self):
        names = [tier['name'] for _, tier in get_vote_tier_showcase()]
        self.assertEqual(names, [tier['name'] for tier in VOTE_BADGE_TIERS])

    def test_negative_rejected(self):
        with self.assertRaises(InvalidArgumentError):
            get_vote_tier(-1)

    def test_gap_in_tier_table_raises(self):
        gapped = [
            {**VOTE_BADGE_TIERS[0], 'max': 49},
            *VOTE_BADGE_TIERS[1:],
        ]
        with patch('products.services.vote_badge_service.VOTE_BADGE_TIERS', gapped):
            self.assertEqual(get_vote_tier(10)['name'], 'Starter')
            with self.assertRaises(VoteTierConfigError) as ctx:
                get_vote_tier(75)
        self.assertEqual(ctx.exception.count, 75)


class UpvoteToggleTest(SimpleTestCase):
    """Test toggle_upvote transitions."""

    def test_upvote(self):
        state = toggle_upvote(UpvoteState(upvotes=41, is_upvoted=False))
        self.assertEqual(state, UpvoteState(upvotes=42, is_upvoted=True))

    def test_remove_upvote(self):
        state = toggle_upvote(UpvoteState(upvotes=42, is_upvoted=True))
        self.assertEqual(state, UpvoteState(upvotes=41, is_upvoted=False))

    def test_toggle_twice_restores_state(self):
        original = UpvoteState(upvotes=99, is_upvoted=False)
        self.assertEqual(toggle_upvote(toggle_upvote(original)), original)

    def test_remove_never_goes_negative(self):
        with self.assertLogs('products.services.upvote_service', level='WARNING'):
            state = toggle_upvote(UpvoteState(upvotes=0, is_upvoted=True))
        self.assertEqual(state.upvotes, 0)
        self.assertFalse(state.is_upvoted)

    def test_invalid_count_rejected(self):
        with self.assertRaises(InvalidArgumentError):
            toggle_upvote(UpvoteState(upvotes=-3, is_upvoted=False))


class CategoryTest(SimpleTestCase):

    def test_known_category(self):
        category = get_category('Productivity')
        self.assertEqual(category['id'], 'Productivity')
        self.assertEqual(category['icon'], '🚀')

    def test_unknown_category(self):
        self.assertIsNone(get_category('Crypto'))
