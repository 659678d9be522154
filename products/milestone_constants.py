"""
Milestone constants - Single source of truth for the upvote milestone ladder.

Shared across milestone_service, vote_badge_service, product_tags and the api app.
"""
from collections import OrderedDict

# Upvote thresholds, strictly increasing. Dense at the low end, sparse at the top.
MILESTONE_LADDER = (100, 200, 300, 400, 500, 1000, 5000, 10000, 25000, 50000, 100000)

# Tier group boundaries (compared against the highest achieved rung)
GROWTH_TIER_THRESHOLD = 1000
ELITE_TIER_THRESHOLD = 10000

# Level arithmetic. These divisors define the badge levels; keep them exact.
STARTER_RUNG_COUNT = 5        # 100..500, one level per rung
GROWTH_LEVEL_GROUP_SIZE = 2   # rungs 6+ grouped by 2
ELITE_LEVEL_GROUP_SIZE = 3    # all achieved rungs grouped by 3
MIN_BADGE_LEVEL = 1
MAX_BADGE_LEVEL = 5

TIER_STARTER = 'starter'
TIER_GROWTH = 'growth'
TIER_ELITE = 'elite'

# Presentation hints per tier group
TIER_GROUPS = OrderedDict([
    (TIER_STARTER, {
        'name': 'Starter',
        'icon': 'zap',
        'color': 'from-blue-500 to-cyan-500',
    }),
    (TIER_GROWTH, {
        'name': 'Growth',
        'icon': 'target',
        'color': 'from-purple-500 to-pink-500',
    }),
    (TIER_ELITE, {
        'name': 'Elite',
        'icon': 'trophy',
        'color': 'from-yellow-400 to-orange-500',
    }),
])

# Popularity tiers shown next to a product's vote count. Ranges are inclusive;
# max=None means open-ended.
VOTE_BADGE_TIERS = [
    {'min': 0, 'max': 99, 'name': 'Starter', 'icon': 'zap', 'emoji': '⚡',
     'color': 'from-gray-400 to-gray-500'},
    {'min': 100, 'max': 299, 'name': 'Rising', 'icon': 'star', 'emoji': '⭐',
     'color': 'from-blue-400 to-blue-500'},
    {'min': 300, 'max': 499, 'name': 'Popular', 'icon': 'target', 'emoji': '🎯',
     'color': 'from-green-400 to-green-500'},
    {'min': 500, 'max': 999, 'name': 'Trending', 'icon': 'medal', 'emoji': '🏅',
     'color': 'from-purple-400 to-purple-500'},
    {'min': 1000, 'max': 4999, 'name': 'Viral', 'icon': 'crown', 'emoji': '👑',
     'color': 'from-orange-400 to-red-500'},
    {'min': 5000, 'max': 9999, 'name': 'Legend', 'icon': 'trophy', 'emoji': '🏆',
     'color': 'from-yellow-400 to-orange-500'},
    {'min': 10000, 'max': None, 'name': 'Epic', 'icon': 'trophy', 'emoji': '💎',
     'color': 'from-pink-400 to-purple-500'},
]

# Sample counts used by the tier showcase (one per popularity tier)
VOTE_TIER_SHOWCASE_COUNTS = [25, 150, 350, 750, 2500, 7500, 15000]

# Category configuration for the product feed tabs
PRODUCT_CATEGORIES = OrderedDict([
    ('all', {'name': 'All', 'icon': '🌐', 'color': 'from-gray-500 to-gray-600'}),
    ('Creative Tools', {'name': 'Creative Tools', 'icon': '🎨', 'color': 'from-pink-500 to-purple-500'}),
    ('Productivity', {'name': 'Productivity', 'icon': '🚀', 'color': 'from-blue-500 to-cyan-500'}),
    ('Fun & Games', {'name': 'Fun & Games', 'icon': '🎮', 'color': 'from-green-500 to-emerald-500'}),
    ('Developer Tools', {'name': 'Developer Tools', 'icon': '🛠️', 'color': 'from-orange-500 to-red-500'}),
    ('AI-Powered', {'name': 'AI-Powered', 'icon': '💡', 'color': 'from-yellow-500 to-orange-500'}),
    ('Side Projects', {'name': 'Side Projects', 'icon': '🌱', 'color': 'from-green-400 to-blue-500'}),
    ('E-commerce', {'name': 'E-commerce', 'icon': '🛒', 'color': 'from-purple-500 to-pink-500'}),
    ('Health & Fitness', {'name': 'Health & Fitness', 'icon': '💪', 'color': 'from-red-500 to-orange-500'}),
    ('Education', {'name': 'Education', 'icon': '📚', 'color': 'from-indigo-500 to-purple-500'}),
])


def get_category(category_id):
    """Return the category config for an id, or None if unknown."""
    category = PRODUCT_CATEGORIES.get(category_id)
    if category is None:
        return None
    return {'id': category_id, **category}
