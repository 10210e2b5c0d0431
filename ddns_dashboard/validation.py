"""
Design (validation.py)
- Purpose: Static input rules for client forms.
- Inputs: ClientDraft (raw form values).
- Outputs: List of human-readable messages ([] when the draft is acceptable).
- Side effects: None.

The domain grammar is a loose approximation: labels of 1-63 alphanumeric/hyphen
characters, not starting or ending with a hyphen, joined by dots. No TLD or
DDNS-provider suffix is enforced.
"""

import re
from typing import List

from .config import (
    MSG_NAME_REQUIRED,
    MSG_LINK_REQUIRED,
    MSG_LINK_INVALID,
    MSG_EQUIPMENT_REQUIRED,
    MSG_EQUIPMENT_UNKNOWN,
)
from .models import ClientDraft, Equipment

_LABEL = r"[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
DOMAIN_PATTERN = re.compile(rf"{_LABEL}(?:\.{_LABEL})*")
SCHEME_PREFIX = re.compile(r"^https?://")


def strip_scheme(link: str) -> str:
    """Remove one leading http:// or https:// (case-sensitive)."""
    return SCHEME_PREFIX.sub("", link, count=1)


def is_valid_domain(link: str) -> bool:
    return DOMAIN_PATTERN.fullmatch(strip_scheme(link)) is not None


def validate_client(draft: ClientDraft) -> List[str]:
    """
    Purpose: Check every rule and collect all violations (no short-circuit).
    Inputs: draft (ClientDraft)
    Outputs: list of messages in field order: name, ddns link, equipment.
    """
    errors: List[str] = []

    if not (draft.name or "").strip():
        errors.append(MSG_NAME_REQUIRED)

    link = (draft.ddns_link or "").strip()
    if not link:
        errors.append(MSG_LINK_REQUIRED)
    elif not is_valid_domain(link):
        errors.append(MSG_LINK_INVALID)

    if draft.equipment is None or not str(draft.equipment).strip():
        errors.append(MSG_EQUIPMENT_REQUIRED)
    elif Equipment.parse(draft.equipment) is None:
        errors.append(MSG_EQUIPMENT_UNKNOWN)

    return errors
