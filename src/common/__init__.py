# Common utilities
from .config_loader import (
    load_category_tags,
    load_config,
    load_site_settings,
)
from .log_config import setup_logging
from .text_utils import escape_quotes, sanitize_name
