"""
Seeded avatar URLs for profiles without an uploaded picture.

The same seed (usually the email or username) always yields the same DiceBear
avatar: the style, background color and style-specific options are all picked
from a 32-bit string hash of the seed.
"""
from collections import OrderedDict
from urllib.parse import urlencode

DICEBEAR_BASE_URL = 'https://api.dicebear.com/7.x'
AVATAR_SIZE = '200'

AVATAR_CATEGORIES = OrderedDict([
    ('people', {
        'name': '👤 People',
        'styles': ['avataaars', 'big-smile', 'open-peeps', 'personas', 'micah'],
    }),
    ('things', {
        'name': '🤖 Things',
        'styles': ['bottts', 'shapes', 'identicon', 'rings', 'beam'],
    }),
])

ALL_AVATAR_STYLES = [style for category in AVATAR_CATEGORIES.values() for style in category['styles']]

BACKGROUND_COLORS = [
    'ff6b6b', '4ecdc4', '45b7d1', 'f9ca24', 'f0932b', 'eb4d4b',
    '6c5ce7', 'a29bfe', 'fd79a8', '00b894', '0984e3', 'fdcb6e',
    '2ecc71', 'e74c3c', '9b59b6', 'f39c12', '1abc9c', 'e67e22',
]

_MOODS = ['happy', 'blissful', 'pleased']
_COLORS = ['blue', 'green', 'purple', 'orange', 'red', 'yellow', 'pink']

# Extra query parameters per style; one value is picked per key.
STYLE_EXTRA_PARAMS = {
    'avataaars': OrderedDict([
        ('accessories', ['wayfarers', 'sunglasses', 'prescription01', 'prescription02']),
        ('top', ['shortHair', 'longHair', 'hat']),
        ('hairColor', ['auburn', 'black', 'blonde', 'brown']),
    ]),
    'bottts': OrderedDict([
        ('colors', ['blue', 'green', 'purple', 'orange', 'red', 'yellow']),
        ('mood', _MOODS),
    ]),
    'shapes': {'colors': ['purple', 'blue', 'pink', 'green', 'orange', 'red', 'yellow']},
    'identicon': {'colors': _COLORS},
    'rings': {'colors': _COLORS},
    'beam': {'colors': _COLORS},
    'open-peeps': OrderedDict([
        ('mood', ['happy', 'surprised', 'blissful']),
        ('hair', ['short', 'long', 'buzz']),
    ]),
    'personas': {'mood': _MOODS},
    'big-smile': {'mood': _MOODS},
    'micah': {'mood': _MOODS},
}


def hash_code(text: str) -> int:
    """
    Java-style String.hashCode over UTF-16 code units, wrapped to a signed 32-bit int.

    Examples:
        >>> hash_code('hello')
        99162322
        >>> hash_code('')
        0
    """
    data = text.encode('utf-16-le')
    value = 0
    for i in range(0, len(data), 2):
        code_unit = data[i] | (data[i + 1] << 8)
        value = (value * 31 + code_unit) & 0xFFFFFFFF
    if value >= 0x80000000:
        value -= 0x100000000
    return value


def _pick(options, seed):
    return options[abs(hash_code(seed)) % len(options)]


def pick_style(seed, category=None):
    """Style from one category's list when the category is known, else from all styles."""
    if category in AVATAR_CATEGORIES:
        return _pick(AVATAR_CATEGORIES[category]['styles'], seed + category)
    return _pick(ALL_AVATAR_STYLES, seed)


def pick_background_color(seed):
    return _pick(BACKGROUND_COLORS, seed + 'bg')


def generate_avatar_url(seed, style=None, category=None):
    """
    Build the avatar URL for a seed.

    Args:
        seed: Unique, stable identifier such as an email or username
        style: Force a DiceBear style instead of picking one from the seed
        category: Restrict the picked style to 'people' or 'things'

    Returns:
        str: DiceBear SVG URL
    """
    selected_style = style or pick_style(seed, category)
    params = [
        ('seed', seed),
        ('backgroundColor', pick_background_color(seed)),
        ('size', AVATAR_SIZE),
        ('format', 'svg'),
    ]
    for key, values in STYLE_EXTRA_PARAMS.get(selected_style, {}).items():
        params.append((f"{key}[]", _pick(values, seed + key)))

    return f"{DICEBEAR_BASE_URL}/{selected_style}/svg?{urlencode(params)}"


def generate_avatar_options(seed, count=4):
    """One avatar for each of the first `count` styles, seeded seed0, seed1, ..."""
    return [
        generate_avatar_url(f"{seed}{index}", style=style)
        for index, style in enumerate(ALL_AVATAR_STYLES[:count])
    ]


def generate_category_avatars(seed, category, count=6):
    """Avatars restricted to one category; an unknown category yields an empty list."""
    if category not in AVATAR_CATEGORIES:
        return []
    return [generate_avatar_url(f"{seed}{category}{i}", category=category) for i in range(count)]


def get_avatar_categories():
    return {key: data['name'] for key, data in AVATAR_CATEGORIES.items()}
