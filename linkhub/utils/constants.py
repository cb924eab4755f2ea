# Application environment
APP_ENV_ENV = 'APP_ENV'
APP_NAME_ENV = 'APP_NAME'
LOG_LEVEL_ENV = 'LOG_LEVEL'

# Public base URL for short links, e.g. https://go.example.com
SHORT_BASE_URL_ENV = 'LINKHUB_SHORT_BASE_URL'

# Default page size for the session's initial list query
PAGE_SIZE_ENV = 'LINKHUB_PAGE_SIZE'
DEFAULT_PAGE_SIZE = 20  # backend default

# API paths (relative to the collaborator's base URL)
LINKS_PATH = '/links'

# Human-readable fallbacks when a failure carries no message
FETCH_LINKS_FAILED = 'Failed to fetch links'
FETCH_LINK_FAILED = 'Failed to fetch link'
CREATE_LINK_FAILED = 'Failed to create link'
UPDATE_LINK_FAILED = 'Failed to update link'
DELETE_LINK_FAILED = 'Failed to delete link'
