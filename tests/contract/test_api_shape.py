import pytest

from common.factories import make_external_clients
from structpatterns.clients import ExternalClientData1Adapter, ExternalClientData2Adapter
from structpatterns.models import ClientData


@pytest.mark.contract
def test_client_to_dict_shape():
    # 契约测试：字典结构与键的形状
    c = ClientData("John Doe", "123 Main St", "555-1234", "john@example.com")
    d = c.to_dict()
    assert set(d.keys()) == {"full_name", "address", "phone_number", "email"}
    assert all(isinstance(v, str) for v in d.values())


@pytest.mark.contract
def test_system1_fields_map_one_to_one():
    ext1, _ = make_external_clients()
    client = ExternalClientData1Adapter(ext1).convert()
    assert client == ClientData("John Doe", "123 Main St", "555-1234", "john@example.com")


@pytest.mark.contract
def test_system2_joins_first_and_last_name():
    _, ext2 = make_external_clients()
    client = ExternalClientData2Adapter(ext2).convert()
    assert client.full_name == "Jane Smith"
    assert client.to_dict() == {
        "full_name": "Jane Smith",
        "address": "456 Oak Ave",
        "phone_number": "555-5678",
        "email": "jane.smith@example.com",
    }


@pytest.mark.contract
def test_display_block(capsys):
    ext1, _ = make_external_clients()
    text = ExternalClientData1Adapter(ext1).convert().display()
    assert text.splitlines() == [
        "Client Information:",
        "Name: John Doe",
        "Address: 123 Main St",
        "Phone: 555-1234",
        "Email: john@example.com",
    ]
    assert capsys.readouterr().out.strip() == text
