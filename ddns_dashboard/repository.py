"""
Design (repository.py)
- Purpose: Encapsulate the client collection behind a tiny API so the UI never touches
           the list directly. Every mutation is validated and applied whole or not at all.
- Inputs: ClientDraft candidates and client ids.
- Outputs: MutationResult / bool for mutations; snapshots (copies) and statistics for reads.
- Side effects: Mutates the internal list and the surfaced error list.
- Thread-safety: Main (Tk) thread only; there is no background worker touching the registry.
"""

import logging
import uuid
from typing import Callable, Iterable, List, Optional, Set

from .config import SEED_CLIENTS
from .models import Client, ClientDraft, Equipment, EquipmentCount, MutationResult, RegistryStats
from .validation import validate_client

logger = logging.getLogger(__name__)


def _new_id() -> str:
    return uuid.uuid4().hex


class ClientRegistry:
    """
    Design (ClientRegistry)
    - State:
        _clients: [Client] in insertion order
        _issued_ids: every id ever handed out (ids are never reused, even after removal)
        _errors: validation messages from the last rejected add/update
        _id_factory: callable producing candidate ids (uuid4 hex by default)
    """

    def __init__(self, clients: Iterable[Client] = (), id_factory: Callable[[], str] = _new_id) -> None:
        self._clients: List[Client] = []
        self._issued_ids: Set[str] = set()
        self._errors: List[str] = []
        self._id_factory = id_factory
        for client in clients:
            if client.id in self._issued_ids:
                raise ValueError(f"duplicate client id: {client.id}")
            self._issued_ids.add(client.id)
            self._clients.append(client)

    @classmethod
    def with_seed_clients(cls, id_factory: Callable[[], str] = _new_id) -> "ClientRegistry":
        """Registry pre-filled with the example clients from config.SEED_CLIENTS."""
        seeds = [
            Client(id=cid, name=name, ddns_link=link, equipment=Equipment(equipment))
            for cid, name, link, equipment in SEED_CLIENTS
        ]
        return cls(seeds, id_factory=id_factory)

    # -------- Reads --------

    def __len__(self) -> int:
        return len(self._clients)

    def get(self, client_id: str) -> Optional[Client]:
        for client in self._clients:
            if client.id == client_id:
                return client
        return None

    def snapshot(self) -> List[Client]:
        """Copy of the ordered collection; safe to iterate while mutating the registry."""
        return list(self._clients)

    @property
    def errors(self) -> List[str]:
        return list(self._errors)

    def clear_errors(self) -> None:
        self._errors = []

    # -------- CRUD --------

    def validate(self, draft: ClientDraft) -> List[str]:
        return validate_client(draft)

    def add(self, draft: ClientDraft) -> MutationResult:
        """
        Purpose: Validate draft and append a new client with a fresh id.
        Outputs: MutationResult(client=new record) or MutationResult(errors=[...]).
        Side effects: On failure the errors are surfaced; on success they are cleared.
        """
        errors = self.validate(draft)
        if errors:
            self._errors = errors
            logger.debug("Rejected new client: %s", "; ".join(errors))
            return MutationResult(errors=list(errors))

        client = Client(
            id=self._next_id(),
            name=draft.name.strip(),
            ddns_link=draft.ddns_link.strip(),
            equipment=Equipment.parse(draft.equipment),
        )
        self._clients.append(client)
        self._errors = []
        logger.info("Added client %s (%s, %s)", client.name, client.ddns_link, client.equipment.value)
        return MutationResult(client=client)

    def update(self, client_id: str, draft: ClientDraft) -> MutationResult:
        """
        Purpose: Replace name/link/equipment of an existing client, keeping id and position.
        Outputs: MutationResult; found=False when client_id is unknown (nothing changes).
        """
        index = self._index_of(client_id)
        if index is None:
            logger.debug("Update ignored, client %s not found", client_id)
            return MutationResult(found=False)

        errors = self.validate(draft)
        if errors:
            self._errors = errors
            logger.debug("Rejected update of client %s: %s", client_id, "; ".join(errors))
            return MutationResult(errors=list(errors))

        client = Client(
            id=client_id,
            name=draft.name.strip(),
            ddns_link=draft.ddns_link.strip(),
            equipment=Equipment.parse(draft.equipment),
        )
        self._clients[index] = client
        self._errors = []
        logger.info("Updated client %s (%s, %s)", client.name, client.ddns_link, client.equipment.value)
        return MutationResult(client=client)

    def remove(self, client_id: str) -> bool:
        """Remove the client with client_id. Returns False (no-op) if it does not exist."""
        index = self._index_of(client_id)
        if index is None:
            logger.debug("Remove ignored, client %s not found", client_id)
            return False
        client = self._clients.pop(index)
        logger.info("Removed client %s (%s)", client.name, client.ddns_link)
        return True

    # -------- Derived --------

    def statistics(self) -> RegistryStats:
        """Recomputed on every call from the current collection."""
        present = [client.equipment for client in self._clients]
        distribution = [
            EquipmentCount(equipment=equipment, count=present.count(equipment))
            for equipment in Equipment
            if equipment in present
        ]
        return RegistryStats(
            total_clients=len(self._clients),
            unique_equipments=len(set(present)),
            equipment_distribution=distribution,
        )

    # -------- Internal --------

    def _index_of(self, client_id: str) -> Optional[int]:
        for i, client in enumerate(self._clients):
            if client.id == client_id:
                return i
        return None

    def _next_id(self) -> str:
        client_id = self._id_factory()
        while client_id in self._issued_ids:
            client_id = self._id_factory()
        self._issued_ids.add(client_id)
        return client_id
