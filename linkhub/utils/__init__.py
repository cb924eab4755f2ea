from linkhub.utils.config import app_env, app_name, short_base_url, page_size, load_config
from linkhub.utils.helpers import get_short_url, require_environment
from linkhub.utils.logging import initialize_logging


__all__ = [
    'app_env',
    'app_name',
    'short_base_url',
    'page_size',
    'load_config',
    'get_short_url',
    'require_environment',
    'initialize_logging',
]
