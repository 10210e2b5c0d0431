"""
Design (models.py)
- Purpose: Define simple, typed data structures for domain entities (Client, Equipment)
           and the values exchanged with the registry (drafts, results, statistics).
- Inputs: Field values (str / Equipment).
- Outputs: Dataclass and enum instances.
- Side effects: None.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union


class Equipment(str, Enum):
    """Closed set of network equipment a client can run. Member order is the display order."""

    FORTIGATE = "fortigate"
    MIKROTIK = "mikrotik"
    PFSENSE = "pfsense"
    UNIFI = "unifi"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: Union["Equipment", str, None]) -> Optional["Equipment"]:
        """Return the member for value (member or its string value), or None if unknown/empty."""
        if isinstance(value, cls):
            return value
        if not value:
            return None
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


@dataclass(frozen=True)
class Client:
    """
    Design (Client)
    - Purpose: One managed customer record.
    - Fields:
        id: opaque unique identifier, assigned by the registry, never changed.
        name: display name (trimmed, non-empty).
        ddns_link: dynamic-DNS address, optionally with http:// or https://.
        equipment: network equipment type.
    """
    id: str
    name: str
    ddns_link: str
    equipment: Equipment


@dataclass
class ClientDraft:
    """
    Design (ClientDraft)
    - Purpose: Candidate field values coming from a form; any field may be missing.
    - Fields:
        name, ddns_link: raw user input (untrimmed).
        equipment: Equipment member, its string value, or None when nothing was picked.
    """
    name: Optional[str] = None
    ddns_link: Optional[str] = None
    equipment: Union[Equipment, str, None] = None

    @classmethod
    def from_client(cls, client: Client) -> "ClientDraft":
        return cls(name=client.name, ddns_link=client.ddns_link, equipment=client.equipment)


@dataclass
class MutationResult:
    """
    Outcome of ClientRegistry.add/update.
    client is the stored record on success, errors the validation messages on failure,
    found is False only when update() referenced an id that no longer exists.
    """
    client: Optional[Client] = None
    errors: List[str] = field(default_factory=list)
    found: bool = True

    @property
    def ok(self) -> bool:
        return self.client is not None

    def __bool__(self) -> bool:
        return self.ok


@dataclass(frozen=True)
class EquipmentCount:
    equipment: Equipment
    count: int


@dataclass(frozen=True)
class RegistryStats:
    total_clients: int
    unique_equipments: int
    equipment_distribution: List[EquipmentCount]
