"""
Design (config.py)
- Purpose: Centralize constants and configuration.
- Inputs: None.
- Outputs: Constants (labels, colors, seed data, messages, window/log settings).
- Side effects: None.
- Thread-safety: N/A (read-only constants).
"""

import logging

APP_TITLE = "LIVTI DNS"
APP_SUBTITLE = "DDNS Link Manager"

ICON_FILE = "logo.ico"  # Expected at ddns_dashboard/icons/logo.ico (optional)

# maximum number of log lines kept in the Logs panel (oldest trimmed)
LOG_MAX_LINES = 1000
LOG_LEVEL = logging.INFO
LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Scheme added to bare DDNS hosts before opening them in the browser
DEFAULT_SCHEME = "https://"

# Keys are Equipment values; order matches the Equipment enum
EQUIPMENT_LABELS = {
    "fortigate": "Fortigate",
    "mikrotik": "Mikrotik",
    "pfsense": "pfSense",
    "unifi": "Unifi",
}

EQUIPMENT_COLORS = {
    "fortigate": "#FF6A6A",
    "mikrotik": "#5DA9FF",
    "pfsense": "#7CFC00",
    "unifi": "#4FC3F7",
}

# (id, name, ddns_link, equipment) for the example clients shown on first start
SEED_CLIENTS = [
    ("1", "Example Client 1", "client1.ddns.net", "fortigate"),
    ("2", "Example Client 2", "client2.ddns.net", "mikrotik"),
]

## Validation messages
MSG_NAME_REQUIRED = "name required"
MSG_LINK_REQUIRED = "ddns link required"
MSG_LINK_INVALID = "ddns link must be a valid domain"
MSG_EQUIPMENT_REQUIRED = "equipment required"
MSG_EQUIPMENT_UNKNOWN = "equipment must be one of: " + ", ".join(EQUIPMENT_LABELS)

LINK_OPEN_ERROR = "Could not open the link. Check that the address is correct."

NOTIFY_TIMEOUT_SEC = 5
