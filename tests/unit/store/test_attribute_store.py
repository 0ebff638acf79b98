"""Unit tests for raw attribute stores."""

from __future__ import annotations

import errno

import pytest

from core.errors import AttributeUnavailableError, AttributeWriteError
from store import attribute_store
from store.attribute_store import MemoryAttributeStore, OsAttributeStore


def _raise_oserror(code: int):
    def _fake(*args: object, **kwargs: object) -> None:
        raise OSError(code, "simulated failure")

    return _fake


def test_os_store_get_missing_path_is_unavailable(tmp_path) -> None:
    """Reading on a nonexistent path should raise AttributeUnavailableError."""
    store = OsAttributeStore()

    with pytest.raises(AttributeUnavailableError) as excinfo:
        store.get(str(tmp_path / "missing"), "user.gfid")

    assert excinfo.value.errno == errno.ENOENT


def test_os_store_set_missing_path_is_unavailable(tmp_path) -> None:
    """Writing on a nonexistent path should raise AttributeUnavailableError."""
    store = OsAttributeStore()

    with pytest.raises(AttributeUnavailableError):
        store.set(str(tmp_path / "missing"), "user.gfid", b"\x00" * 16)


def test_os_store_set_rejected_write_is_write_error(monkeypatch: pytest.MonkeyPatch) -> None:
    """Permission and quota failures on write should raise AttributeWriteError."""
    monkeypatch.setattr(attribute_store.xattr, "setxattr", _raise_oserror(errno.EACCES))
    store = OsAttributeStore()

    with pytest.raises(AttributeWriteError) as excinfo:
        store.set("/bricks/b1", "trusted.gfid", b"\x00" * 16)

    assert excinfo.value.errno == errno.EACCES
    assert isinstance(excinfo.value.__cause__, OSError)


def test_os_store_set_unsupported_filesystem_is_unavailable(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Missing xattr support on write should raise AttributeUnavailableError."""
    monkeypatch.setattr(attribute_store.xattr, "setxattr", _raise_oserror(errno.ENOTSUP))
    store = OsAttributeStore()

    with pytest.raises(AttributeUnavailableError):
        store.set("/bricks/b1", "trusted.gfid", b"\x00" * 16)


def test_os_store_passes_symlink_option(monkeypatch: pytest.MonkeyPatch) -> None:
    """Disabling symlink following should address the link itself."""
    calls: list[dict[str, object]] = []

    def _fake_getxattr(path: str, name: str, symlink: bool = False) -> bytes:
        calls.append({"path": path, "name": name, "symlink": symlink})
        return b"value"

    monkeypatch.setattr(attribute_store.xattr, "getxattr", _fake_getxattr)
    store = OsAttributeStore(follow_symlinks=False)

    value = store.get("/bricks/b1/link", "trusted.gfid")

    assert value == b"value"
    assert calls == [{"path": "/bricks/b1/link", "name": "trusted.gfid", "symlink": True}]


def test_memory_store_roundtrip() -> None:
    """Memory store should return the bytes last written."""
    store = MemoryAttributeStore()
    store.add_path("/bricks/b1")

    store.set("/bricks/b1", "user.gfid", b"abc")

    assert store.get("/bricks/b1", "user.gfid") == b"abc"


def test_memory_store_missing_attribute_is_unavailable() -> None:
    """Unknown attribute names should raise AttributeUnavailableError."""
    store = MemoryAttributeStore()
    store.add_path("/bricks/b1")

    with pytest.raises(AttributeUnavailableError):
        store.get("/bricks/b1", "user.gfid")


def test_memory_store_unknown_path_is_unavailable() -> None:
    """Unregistered paths should behave like missing files."""
    store = MemoryAttributeStore()

    with pytest.raises(AttributeUnavailableError):
        store.set("/bricks/missing", "user.gfid", b"abc")
