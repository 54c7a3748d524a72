import pytest

from arakit.communication_group import (
    CommunicationGroupClient,
    CommunicationGroupServer,
)


def test_client_message_forwards_to_handler():
    received = []
    client = CommunicationGroupClient(received.append)
    client.message("request-a")
    client.message("request-b")
    assert received == ["request-a", "request-b"]


def test_client_message_passes_same_object():
    received = []
    client = CommunicationGroupClient(received.append)
    payload = {"command": "start"}
    client.message(payload)
    assert received[0] is payload


def test_server_response_forwards_client_id_and_message():
    received = []
    server = CommunicationGroupServer(lambda cid, msg: received.append((cid, msg)))
    server.response(7, "ok")
    server.response(0, "fine")
    assert received == [(7, "ok"), (0, "fine")]


def test_server_accepts_largest_client_id():
    received = []
    server = CommunicationGroupServer(lambda cid, msg: received.append(cid))
    server.response(0xFFFFFFFF, "last")
    assert received == [0xFFFFFFFF]


@pytest.mark.parametrize("client_id", [-1, 0x100000000])
def test_server_rejects_out_of_range_client_id(client_id):
    received = []
    server = CommunicationGroupServer(lambda cid, msg: received.append(cid))
    with pytest.raises(ValueError):
        server.response(client_id, "bad")
    assert received == []


def test_handler_exception_propagates():
    def failing(msg):
        raise RuntimeError("handler failed")

    client = CommunicationGroupClient(failing)
    with pytest.raises(RuntimeError, match="handler failed"):
        client.message("x")