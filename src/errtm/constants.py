# ==========================================
# 1. Logging
# ==========================================
LOGGER_NAME = "errtm"
DEBUG_MODE_VALUE = "DEBUG"

LOG_FORMAT = "%(log_color)s[%(levelname)s] %(message)s"
LOG_COLORS = {
    "DEBUG":    "cyan",
    "INFO":     "green",
    "WARNING":  "yellow",
    "ERROR":    "red",
    "CRITICAL": "red,bg_white",
}

# ==========================================
# 2. Configuration Filenames
# ==========================================
TEMPLATE_CONFIG_FILE = "config_error_template.json"

# Keys accepted in a template config file / descriptor mapping
DESCRIPTOR_FIELDS = [
    "id",
    "provider_name",
    "resource_name",
    "cause",
    "attribute",
    "state",
]

# Field names used by older callers, mapped to their current names
DESCRIPTOR_FIELD_ALIASES = {
    "ID": "id",
    "ProviderName": "provider_name",
    "ResourceName": "resource_name",
    "Error": "cause",
    "Cause": "cause",
    "Attribute": "attribute",
    "Type": "state",
    "State": "state",
}

# ==========================================
# 3. Message Words
# ==========================================
LEADING_WORD = "error"
LOCATION_WORD = "in"
ANONYMOUS_ATTRIBUTE_PHRASE = "an attribute"
