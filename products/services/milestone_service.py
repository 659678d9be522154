"""
Milestone service - Upvote milestone progress and badge tier calculations.

This service derives everything the upvote button shows from a raw vote count:
- Progress toward the next rung of the milestone ladder
- The achievement badge (tier group and level) for rungs already crossed

All functions are pure: they read only the constant ladder and the count
passed in, so they are safe to call from any request thread.
"""
import logging
import math
from bisect import bisect_left, bisect_right
from dataclasses import dataclass, asdict
from numbers import Integral, Real
from typing import Optional

from products.exceptions import InvalidArgumentError
from products.milestone_constants import (
    MILESTONE_LADDER, GROWTH_TIER_THRESHOLD, ELITE_TIER_THRESHOLD,
    STARTER_RUNG_COUNT, GROWTH_LEVEL_GROUP_SIZE, ELITE_LEVEL_GROUP_SIZE,
    MIN_BADGE_LEVEL, MAX_BADGE_LEVEL, TIER_STARTER, TIER_GROWTH, TIER_ELITE,
    TIER_GROUPS,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MilestoneProgress:
    previous_milestone: int
    current_milestone: int
    progress_percent: float
    is_complete: bool

    def to_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class BadgeTier:
    milestone: int
    tier_group: str
    level: int
    achieved_count: int
    name: str
    icon: str
    color: str

    def to_dict(self):
        return asdict(self)


def validate_vote_count(count) -> int:
    """
    Check that a vote count is a finite, non-negative integer.

    Integral floats (e.g. 100.0) are accepted and returned as int. Booleans
    are rejected even though they are ints in Python.

    Raises:
        InvalidArgumentError: For negative, non-finite, fractional or
            non-numeric values.
    """
    if isinstance(count, bool) or not isinstance(count, Real):
        logger.debug(f"Rejected vote count of type {type(count).__name__}")
        raise InvalidArgumentError(count, reason="must be an integer")

    if isinstance(count, Integral):
        count = int(count)
    else:
        if not math.isfinite(count):
            logger.debug(f"Rejected non-finite vote count {count!r}")
            raise InvalidArgumentError(count, reason="must be finite")
        if not float(count).is_integer():
            logger.debug(f"Rejected fractional vote count {count!r}")
            raise InvalidArgumentError(count, reason="must be an integer")
        count = int(count)

    if count < 0:
        logger.debug(f"Rejected negative vote count {count}")
        raise InvalidArgumentError(count, reason="must not be negative")

    return count


def get_next_milestone(count: int) -> Optional[int]:
    """Smallest rung strictly greater than count, or None once past the top."""
    index = bisect_right(MILESTONE_LADDER, count)
    if index < len(MILESTONE_LADDER):
        return MILESTONE_LADDER[index]
    return None


def get_achieved_milestones(count: int) -> tuple:
    """All rungs less than or equal to count, in ladder order."""
    return MILESTONE_LADDER[:bisect_right(MILESTONE_LADDER, count)]


def compute_milestone_progress(count) -> MilestoneProgress:
    """
    Calculate progress toward the next milestone for a vote count.

    Hitting a rung exactly moves the target to the following rung, so the
    progress bar resets to 0% (e.g. 100 votes -> 0% of the way to 200).
    Once the count reaches the top rung, previous and current are both pinned
    to it and progress stays at 100%.

    Args:
        count: Non-negative vote count

    Returns:
        MilestoneProgress: previous/current milestone, percent and completion

    Raises:
        InvalidArgumentError: If count is negative or not a finite integer
    """
    count = validate_vote_count(count)
    top = MILESTONE_LADDER[-1]

    current = get_next_milestone(count)
    if current is None:
        return MilestoneProgress(
            previous_milestone=top,
            current_milestone=top,
            progress_percent=100.0,
            is_complete=True,
        )

    index = bisect_left(MILESTONE_LADDER, current)
    previous = MILESTONE_LADDER[index - 1] if index > 0 else 0

    span = current - previous
    progress = (count - previous) / span * 100
    progress = min(max(progress, 0.0), 100.0)

    return MilestoneProgress(
        previous_milestone=previous,
        current_milestone=current,
        progress_percent=progress,
        is_complete=count >= current,
    )


def get_tier_group(milestone: int) -> str:
    """Classify an achieved rung into starter, growth or elite."""
    if milestone >= ELITE_TIER_THRESHOLD:
        return TIER_ELITE
    if milestone >= GROWTH_TIER_THRESHOLD:
        return TIER_GROWTH
    return TIER_STARTER


def calculate_badge_level(tier_group: str, achieved_count: int) -> int:
    """
    Level within a tier group from the number of rungs achieved.

    Starter counts one level per rung, Growth groups the rungs after the first
    five in pairs, and Elite groups every achieved rung in threes. The result
    is clamped to [1, 5].
    """
    if tier_group == TIER_ELITE:
        level = achieved_count // ELITE_LEVEL_GROUP_SIZE + 1
    elif tier_group == TIER_GROWTH:
        level = (achieved_count - STARTER_RUNG_COUNT) // GROWTH_LEVEL_GROUP_SIZE + 1
    else:
        level = achieved_count

    return min(max(level, MIN_BADGE_LEVEL), MAX_BADGE_LEVEL)


def compute_badge_tier(count) -> Optional[BadgeTier]:
    """
    Calculate the achievement badge for a vote count.

    Args:
        count: Non-negative vote count

    Returns:
        BadgeTier, or None if the count is below the first rung

    Raises:
        InvalidArgumentError: If count is negative or not a finite integer
    """
    count = validate_vote_count(count)

    achieved = get_achieved_milestones(count)
    if not achieved:
        return None

    highest = achieved[-1]
    tier_group = get_tier_group(highest)
    config = TIER_GROUPS[tier_group]

    return BadgeTier(
        milestone=highest,
        tier_group=tier_group,
        level=calculate_badge_level(tier_group, len(achieved)),
        achieved_count=len(achieved),
        name=config['name'],
        icon=config['icon'],
        color=config['color'],
    )


def get_milestone_summary(count) -> dict:
    """
    Progress and badge for a count in one dict, ready for templates or JSON.

    Returns:
        dict: {'count': int, 'progress': dict, 'badge': dict or None}
    """
    count = validate_vote_count(count)
    badge = compute_badge_tier(count)
    return {
        'count': count,
        'progress': compute_milestone_progress(count).to_dict(),
        'badge': badge.to_dict() if badge else None,
    }
