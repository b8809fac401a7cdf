# Environment variables
ENV_BASE_URL = "JIRA_BASE_URL"
ENV_EMAIL = "JIRA_EMAIL"
ENV_API_TOKEN = "JIRA_API_TOKEN"
ENV_ACCESS_TOKEN = "JIRA_ACCESS_TOKEN"
ENV_TIMEOUT = "JIRA_TIMEOUT"

# Headers
HEADER_ACCEPT = "Accept"
HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_EXPERIMENTAL_API = "X-ExperimentalApi"
HEADER_ATLASSIAN_TOKEN = "X-Atlassian-Token"
HEADER_RETRY_AFTER = "Retry-After"

# Media types
MEDIA_TYPE_JSON = "application/json"

DEFAULT_TIMEOUT = 30.0

LOGGER_NAME = "jira_rest"
