"""Configuration constants for kaddu application."""

# Supported languages, in menu order (must match catalog form keys)
LANGUAGES = (
    'balante', 'bandial', 'bayot', 'fonyi', 'kassa', 'laalaa',
    'mancagne', 'manjak', 'ndut', 'noon', 'pulaar', 'saafisaafi',
    'seereersine', 'wolof'
)

# Display names that are not a plain capitalization of the code
LANGUAGE_DISPLAY_NAMES = {
    'seereersine': 'Seereer Sine',
    'saafisaafi': 'Saafi-Saafi',
}

# Game rules
QUESTION_COUNT = 20           # Questions per session
RETRY_PRONUNCIATION_DELAY_MS = 400  # Gap between failure tone and pronunciation

# Option ordering
COLLATION_LOCALE = 'fr'

# Asset locations, relative to the asset root
IMAGE_PATH = 'images/{id}.png'
PRONUNCIATION_PATH = 'audio/{language}/{id}.mp3'
CHIME_PATH = 'sounds/ding.mp3'
FAILURE_TONE_PATH = 'sounds/thud.mp3'

# Synthesized failure tone
FAILURE_TONE_FREQUENCY = 140.0  # Hz
FAILURE_TONE_SECONDS = 0.25

# Catalog
CATALOG_PATH = 'data/words.json'
