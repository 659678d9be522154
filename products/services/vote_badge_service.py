"""
Vote badge service - Popularity tier shown beside a product's vote count.

Unlike the milestone badge, every count (including 0) falls in exactly one
popularity tier.
"""
from products.exceptions import VoteTierConfigError
from products.milestone_constants import VOTE_BADGE_TIERS, VOTE_TIER_SHOWCASE_COUNTS
from products.services.milestone_service import validate_vote_count


def _in_range(tier, count):
    return count >= tier['min'] and (tier['max'] is None or count <= tier['max'])


def get_vote_tier(count) -> dict:
    """
    Find the popularity tier containing a vote count.

    Args:
        count: Non-negative vote count

    Returns:
        dict: Copy of the tier config (min, max, name, icon, emoji, color)

    Raises:
        InvalidArgumentError: If count is negative or not a finite integer
        VoteTierConfigError: If VOTE_BADGE_TIERS leaves a gap at this count
    """
    count = validate_vote_count(count)
    for tier in VOTE_BADGE_TIERS:
        if _in_range(tier, count):
            return dict(tier)
    raise VoteTierConfigError(count)


def get_vote_tier_showcase():
    """Return (sample_count, tier) pairs, one per popularity tier."""
    return [(count, get_vote_tier(count)) for count in VOTE_TIER_SHOWCASE_COUNTS]
