import pytest

from ddns_dashboard.config import (
    MSG_EQUIPMENT_REQUIRED,
    MSG_EQUIPMENT_UNKNOWN,
    MSG_LINK_INVALID,
    MSG_LINK_REQUIRED,
    MSG_NAME_REQUIRED,
)
from ddns_dashboard.models import ClientDraft, Equipment
from ddns_dashboard.validation import is_valid_domain, strip_scheme, validate_client


def draft(**overrides):
    fields = {"name": "Acme", "ddns_link": "acme.ddns.net", "equipment": Equipment.FORTIGATE}
    fields.update(overrides)
    return ClientDraft(**fields)


def test_valid_draft_has_no_errors():
    assert validate_client(draft()) == []


@pytest.mark.parametrize("name", [None, "", "   ", "\t\n"])
def test_blank_name_is_required(name):
    assert MSG_NAME_REQUIRED in validate_client(draft(name=name))


@pytest.mark.parametrize("link", [None, "", "   "])
def test_blank_link_is_required_and_not_reported_as_invalid(link):
    errors = validate_client(draft(ddns_link=link))
    assert MSG_LINK_REQUIRED in errors
    assert MSG_LINK_INVALID not in errors


@pytest.mark.parametrize(
    "link",
    ["client1.ddns.net", "https://client2.ddns.net", "http://router-01.example.com", "localhost", "  padded.ddns.net  "],
)
def test_valid_domains_are_accepted(link):
    assert MSG_LINK_INVALID not in validate_client(draft(ddns_link=link))


@pytest.mark.parametrize(
    "link",
    [
        "not a domain!!",
        "-leading.ddns.net",
        "trailing-.ddns.net",
        "double..dot.net",
        "ends.with.dot.",
        "https://",
        "ftp://client.ddns.net",
        "client.ddns.net/path",
        "a" * 64 + ".net",
    ],
)
def test_invalid_domains_are_rejected(link):
    assert MSG_LINK_INVALID in validate_client(draft(ddns_link=link))


def test_label_of_63_characters_is_accepted():
    assert is_valid_domain("a" * 63 + ".net")


def test_tld_is_not_checked():
    assert is_valid_domain("client.notarealtld")


def test_strip_scheme_removes_only_one_http_prefix():
    assert strip_scheme("https://host.net") == "host.net"
    assert strip_scheme("http://https://host.net") == "https://host.net"
    assert strip_scheme("HTTPS://host.net") == "HTTPS://host.net"


def test_missing_equipment_is_required():
    assert validate_client(draft(equipment=None)) == [MSG_EQUIPMENT_REQUIRED]
    assert validate_client(draft(equipment="")) == [MSG_EQUIPMENT_REQUIRED]


def test_equipment_string_values_are_accepted():
    assert validate_client(draft(equipment="pfsense")) == []


def test_unknown_equipment_is_rejected():
    assert validate_client(draft(equipment="cisco")) == [MSG_EQUIPMENT_UNKNOWN]


def test_all_violations_are_reported_together():
    errors = validate_client(ClientDraft(name=" ", ddns_link="not a domain!!"))
    assert errors == [MSG_NAME_REQUIRED, MSG_LINK_INVALID, MSG_EQUIPMENT_REQUIRED]


def test_empty_draft_reports_every_required_field():
    assert validate_client(ClientDraft()) == [MSG_NAME_REQUIRED, MSG_LINK_REQUIRED, MSG_EQUIPMENT_REQUIRED]
