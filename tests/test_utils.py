import pytest

from torro import config
from torro.error import BadFileRead, TorroError
from torro.utils import generate_peer_id, read_file_bytes


def test_read_file_bytes(tmp_path):
    path = tmp_path / "data.bin"
    path.write_bytes(b"\x00d8:announcee\xff")

    assert read_file_bytes(path) == b"\x00d8:announcee\xff"
    assert read_file_bytes(str(path)) == b"\x00d8:announcee\xff"


def test_read_file_bytes_failure(tmp_path):
    with pytest.raises(BadFileRead) as exc:
        read_file_bytes(tmp_path / "nope.torrent")
    assert isinstance(exc.value, TorroError)
    assert "nope.torrent" in str(exc.value)

    # a directory cannot be read as a file either
    with pytest.raises(BadFileRead):
        read_file_bytes(tmp_path)


def test_generate_peer_id():
    peer_id = generate_peer_id()
    print("Peer id:", peer_id)

    assert len(peer_id) == config.PEER_ID_LENGTH
    assert peer_id.startswith(f"-{config.CLIENT_PREFIX}".encode())
    assert peer_id[8:].isdigit()


def test_generate_peer_id_varies():
    ids = {generate_peer_id() for _ in range(50)}
    assert len(ids) > 1
