"""
Upvote service - Optimistic upvote toggling for the upvote button.

The real vote is recorded by the hosted backend; this only computes what the
button should show immediately after a click.
"""
import logging
from dataclasses import dataclass

from products.services.milestone_service import validate_vote_count

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpvoteState:
    upvotes: int
    is_upvoted: bool


def toggle_upvote(state: UpvoteState) -> UpvoteState:
    """
    Flip the viewer's upvote and adjust the displayed count by one.

    Removing an upvote never takes the count below zero.
    """
    upvotes = validate_vote_count(state.upvotes)

    if state.is_upvoted:
        if upvotes == 0:
            logger.warning("Upvote removed from a product showing 0 votes")
        return UpvoteState(upvotes=max(upvotes - 1, 0), is_upvoted=False)

    return UpvoteState(upvotes=upvotes + 1, is_upvoted=True)
