"""
Activity service - Builds the "what's happening" feed from recent rows.

The hosted backend supplies the rows (recent launches, recent upvotes and the
most upvoted products); this module only turns them into feed items:
- Product launches
- Upvotes grouped per product ("X and 2 others upvoted P")
- Vote-count milestones every 25 upvotes, otherwise trending products
- Relative "time ago" labels, newest first

Rows are plain dicts. Timestamps may be datetimes or ISO 8601 strings.
"""
import logging
from datetime import datetime, timezone as dt_timezone

from django.utils import timezone
from django.utils.dateparse import parse_datetime

logger = logging.getLogger(__name__)

ACTIVITY_MILESTONE_STEP = 25
TRENDING_MIN_UPVOTES = 10
DEFAULT_ACTIVITY_LIMIT = 10

ANONYMOUS_CREATOR = 'Anonymous'
ANONYMOUS_VOTER = 'Someone'


def _to_datetime(value):
    if isinstance(value, datetime):
        dt = value
    else:
        dt = parse_datetime(value) if value else None
        if dt is None:
            raise ValueError(f"Unparseable timestamp: {value!r}")
    if timezone.is_naive(dt):
        dt = timezone.make_aware(dt, dt_timezone.utc)
    return dt


def _display_name(profile, fallback):
    if not profile:
        return fallback
    return profile.get('full_name') or profile.get('username') or fallback


def get_time_ago(timestamp, now=None) -> str:
    """
    Compact relative time label.

    Examples:
        59 seconds -> '59s ago', 60 seconds -> '1m ago',
        23 hours -> '23h ago', 24 hours -> '1d ago'
    """
    now = _to_datetime(now) if now is not None else timezone.now()
    seconds = int((now - _to_datetime(timestamp)).total_seconds())

    if seconds < 60:
        return f"{seconds}s ago"

    minutes = seconds // 60
    if minutes < 60:
        return f"{minutes}m ago"

    hours = minutes // 60
    if hours < 24:
        return f"{hours}h ago"

    return f"{hours // 24}d ago"


def _activity(activity_id, activity_type, message, product, user_name, profile, timestamp, now):
    return {
        'id': activity_id,
        'type': activity_type,
        'message': message,
        'time': get_time_ago(timestamp, now),
        'product_name': product.get('name'),
        'user_name': user_name,
        'product_slug': product.get('slug') or None,
        'user_avatar': (profile or {}).get('avatar_url') or None,
        'timestamp': timestamp,
    }


def build_launch_activities(products, now):
    activities = []
    for product in products:
        profile = product.get('profile')
        user_name = _display_name(profile, ANONYMOUS_CREATOR)
        activities.append(_activity(
            f"launch-{product['id']}", 'launch',
            f"{product['name']} launched by {user_name}",
            product, user_name, profile, _to_datetime(product['created_at']), now,
        ))
    return activities


def build_upvote_activities(upvotes, now):
    """
    Collapse upvotes into one feed item per product.

    The first voter seen names the group; the item is stamped with the latest
    upvote's time. Upvotes without a product are skipped.
    """
    groups = {}
    for upvote in upvotes:
        product = upvote.get('product')
        if not product:
            continue

        product_id = upvote.get('product_id') or product.get('id')
        created_at = _to_datetime(upvote['created_at'])
        group = groups.get(product_id)
        if group:
            group['count'] += 1
            group['profiles'].append(upvote.get('profile'))
            if created_at > group['latest']:
                group['latest'] = created_at
        else:
            groups[product_id] = {
                'count': 1,
                'latest': created_at,
                'product': product,
                'profiles': [upvote.get('profile')],
            }

    activities = []
    for product_id, group in groups.items():
        profile = group['profiles'][0]
        user_name = _display_name(profile, ANONYMOUS_VOTER)
        product_name = group['product']['name']

        if group['count'] == 1:
            message = f"{user_name} upvoted {product_name}"
        elif group['count'] == 2:
            message = f"{user_name} and 1 other upvoted {product_name}"
        else:
            message = f"{user_name} and {group['count'] - 1} others upvoted {product_name}"

        activities.append(_activity(
            f"upvote-group-{product_id}", 'upvote', message,
            group['product'], user_name, profile, group['latest'], now,
        ))
    return activities


def build_trending_activities(products, now):
    """
    Milestone items for counts on a multiple of 25, trending items otherwise.

    A product at a milestone never also appears as trending.
    """
    activities = []
    for product in products:
        upvotes = product.get('upvotes') or 0
        profile = product.get('profile')
        user_name = _display_name(profile, ANONYMOUS_CREATOR)
        updated_at = _to_datetime(product['updated_at'])

        if upvotes > 0 and upvotes % ACTIVITY_MILESTONE_STEP == 0:
            activities.append(_activity(
                f"milestone-{product['id']}-{upvotes}", 'milestone',
                f"{product['name']} just hit {upvotes} upvotes! 🔥",
                product, user_name, profile, updated_at, now,
            ))
        elif upvotes >= TRENDING_MIN_UPVOTES:
            activities.append(_activity(
                f"trending-{product['id']}", 'trending',
                f"{product['name']} is trending with {upvotes} upvotes! 📈",
                product, user_name, profile, updated_at, now,
            ))
    return activities


def build_recent_activity(recent_products=(), recent_upvotes=(), trending_products=(),
                          limit=DEFAULT_ACTIVITY_LIMIT, now=None):
    """
    Merge launches, grouped upvotes and trending/milestone items into one feed.

    Args:
        recent_products: Product rows launched recently, each with 'id', 'name',
            'slug', 'created_at' and an optional 'profile' (creator)
        recent_upvotes: Upvote rows with 'created_at', 'product_id', 'product'
            and an optional 'profile' (voter)
        trending_products: Product rows with 'id', 'name', 'upvotes',
            'updated_at' and an optional 'profile'
        limit: Maximum number of items returned
        now: Reference time for the "time ago" labels (defaults to now)

    Returns:
        list: Activity dicts, newest first
    """
    now = _to_datetime(now) if now is not None else timezone.now()

    activities = (
        build_launch_activities(recent_products, now)
        + build_upvote_activities(recent_upvotes, now)
        + build_trending_activities(trending_products, now)
    )
    activities.sort(key=lambda item: item['timestamp'], reverse=True)

    logger.debug(f"Built {len(activities)} activity items, returning up to {limit}")
    return activities[:limit]
