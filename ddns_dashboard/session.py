"""
Design (session.py)
- Purpose: Hold the dashboard's form state (add dialog, edit dialog, pending deletion) and
           route user actions to the registry. Keeps all UI decisions testable without Tk.
- Inputs: ClientRegistry, Notifier.
- Outputs: Results of each user action (MutationResult / Client / None).
- Side effects: Mutates the registry; sends notifications for committed changes.
- Thread-safety: Main (Tk) thread only.
"""

import logging
from typing import List, Optional

from .models import Client, ClientDraft, MutationResult
from .notifier import Notifier
from .repository import ClientRegistry

logger = logging.getLogger(__name__)


class DashboardSession:
    """
    Design (DashboardSession)
    - State:
        adding: True while the add dialog is open
        editing_id: id of the client in the edit dialog (None when closed)
        pending_delete: client awaiting confirmation (None when no deletion is pending)
    - Deletion is two-step: request_delete() only selects; confirm_delete() removes.
    """

    def __init__(self, registry: ClientRegistry, notifier: Optional[Notifier] = None) -> None:
        self.registry = registry
        self.notifier = notifier or Notifier(enabled=False)
        self.adding = False
        self.editing_id: Optional[str] = None
        self.pending_delete: Optional[Client] = None

    @property
    def errors(self) -> List[str]:
        return self.registry.errors

    # -------- Add --------

    def open_add(self) -> None:
        self.registry.clear_errors()
        self.adding = True

    def cancel_add(self) -> None:
        self.registry.clear_errors()
        self.adding = False

    def submit_add(self, draft: ClientDraft) -> MutationResult:
        result = self.registry.add(draft)
        if result:
            self.adding = False
            self.notifier.client_added(result.client)
        return result

    # -------- Edit --------

    def open_edit(self, client_id: str) -> Optional[ClientDraft]:
        """Returns the pre-filled draft, or None when the client no longer exists."""
        client = self.registry.get(client_id)
        if client is None:
            logger.debug("Edit ignored, client %s not found", client_id)
            return None
        self.registry.clear_errors()
        self.editing_id = client_id
        return ClientDraft.from_client(client)

    def cancel_edit(self) -> None:
        self.registry.clear_errors()
        self.editing_id = None

    def submit_edit(self, draft: ClientDraft) -> MutationResult:
        if self.editing_id is None:
            return MutationResult(found=False)
        result = self.registry.update(self.editing_id, draft)
        if not result.found:
            self.editing_id = None
        elif result:
            self.editing_id = None
            self.notifier.client_updated(result.client)
        return result

    # -------- Delete --------

    def request_delete(self, client_id: str) -> Optional[Client]:
        self.pending_delete = self.registry.get(client_id)
        return self.pending_delete

    def cancel_delete(self) -> None:
        self.pending_delete = None

    def confirm_delete(self) -> Optional[Client]:
        """Commit the pending deletion. Returns the removed client, or None if nothing was removed."""
        client, self.pending_delete = self.pending_delete, None
        if client is None or not self.registry.remove(client.id):
            return None
        self.notifier.client_removed(client)
        return client
