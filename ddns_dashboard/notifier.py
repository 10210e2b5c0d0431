"""
Design (notifier.py)
- Purpose: Send short desktop notifications when the client list changes.
- Inputs: Title/message strings; enabled flag toggled from the UI.
- Outputs: None.
- Side effects: Calls plyer's platform notification backend.
- Errors: Backend failures are logged and swallowed; a notification never aborts a mutation.
"""

import logging

from plyer import notification

from .config import APP_TITLE, NOTIFY_TIMEOUT_SEC
from .models import Client

logger = logging.getLogger(__name__)


class Notifier:
    def __init__(self, enabled: bool = True, timeout: int = NOTIFY_TIMEOUT_SEC) -> None:
        self.enabled = enabled
        self.timeout = timeout

    def notify(self, title: str, message: str) -> bool:
        """Returns True if a notification was handed to the backend."""
        if not self.enabled:
            return False
        try:
            notification.notify(title=title, message=message, app_name=APP_TITLE, timeout=self.timeout)
        except NotImplementedError:
            logger.warning("Desktop notifications are not supported on this platform")
            return False
        except Exception as exc:
            logger.warning("Desktop notification failed: %s", exc)
            return False
        return True

    def client_added(self, client: Client) -> bool:
        return self.notify("Client Added", f"{client.name} ({client.ddns_link}) was added")

    def client_updated(self, client: Client) -> bool:
        return self.notify("Client Updated", f"{client.name} ({client.ddns_link}) was updated")

    def client_removed(self, client: Client) -> bool:
        return self.notify("Client Removed", f"{client.name} ({client.ddns_link}) was removed")
