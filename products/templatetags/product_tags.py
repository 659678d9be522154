"""
Template tags for upvote milestones and popularity badges.
"""
from django import template
from humanize import intcomma

from products.services.milestone_service import compute_milestone_progress, compute_badge_tier
from products.services.vote_badge_service import get_vote_tier

register = template.Library()


@register.simple_tag
def milestone_progress(count):
    """
    Progress toward the next upvote milestone.

    Usage in templates:
        {% milestone_progress product.upvotes as progress %}
        <div style="width: {{ progress.progress_percent }}%"></div>
    """
    return compute_milestone_progress(count)


@register.simple_tag
def milestone_badge(count):
    """
    Achievement badge for the milestones a product has crossed.

    Usage in templates:
        {% milestone_badge product.upvotes as badge %}
        {% if badge %}{{ badge.name }} {{ badge.level|badge_level_label }}{% endif %}

    Returns BadgeTier or None if below the first milestone.
    """
    return compute_badge_tier(count)


@register.simple_tag
def vote_tier(count):
    """
    Popularity tier for a vote count.

    Usage in templates:
        {% vote_tier product.upvotes as tier %}
        {{ tier.emoji }} {{ tier.name }}
    """
    return get_vote_tier(count)


@register.filter
def vote_tier_name(count):
    """
    Usage:
        {{ product.upvotes|vote_tier_name }}
    """
    return get_vote_tier(count)['name']


@register.filter
def format_votes(count):
    """
    Vote count with thousands separators.

    Usage:
        {{ product.upvotes|format_votes }}  -> 1,234
    """
    return intcomma(count)


@register.filter
def badge_level_label(level):
    """
    Usage:
        {{ badge.level|badge_level_label }}  -> x3
    """
    if not level:
        return ''
    return f"x{level}"
