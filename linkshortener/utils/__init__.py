from linkshortener.utils.config import app_env, slug_length, load_config
from linkshortener.utils.slugs import ALPHABET, generate_slug
from linkshortener.utils.validation import validate_url
from linkshortener.utils.logging import initialize_logging


__all__ = [
    'ALPHABET',
    'generate_slug',
    'validate_url',
    'app_env',
    'slug_length',
    'load_config',
    'initialize_logging',
]
