from dataclasses import dataclass

import pytest

from amber_engine.asset_storage import AssetHandle, AssetStorage


@dataclass
class Sprite:
    name: str
    size: int = 1


@dataclass
class Sound:
    name: str


def test_add_and_get():
    storage = AssetStorage(Sprite)
    first = storage.add("hero", size=3)
    second = storage.add("enemy")
    assert first == AssetHandle(0, Sprite)
    assert second.index == 1
    assert storage.get(first) == Sprite("hero", 3)
    assert storage.get(second) == Sprite("enemy", 1)


def test_remove_invalidates_handle():
    storage = AssetStorage(Sprite)
    handle = storage.add("hero")
    assert storage.remove(handle) is True
    assert not storage.validity(handle)
    assert storage.remove(handle) is False
    with pytest.raises(KeyError):
        storage.get(handle)


def test_freed_slots_reused_last_first():
    storage = AssetStorage(Sprite)
    handles = [storage.add(n) for n in ("a", "b", "c")]
    storage.remove(handles[0])
    storage.remove(handles[2])
    assert storage.add("d").index == handles[2].index
    assert storage.add("e").index == handles[0].index
    assert storage.add("f").index == 3


def test_wrong_type_is_invalid():
    storage = AssetStorage(Sprite)
    storage.add("hero")
    foreign = AssetHandle(0, Sound)
    assert not storage.validity(foreign)
    assert storage.remove(foreign) is False


@pytest.mark.parametrize("index", [-1, 5])
def test_out_of_range_is_invalid(index):
    storage = AssetStorage(Sprite)
    storage.add("hero")
    assert not storage.validity(AssetHandle(index, Sprite))


def test_remove_all():
    storage = AssetStorage(Sprite)
    handles = [storage.add(n) for n in ("a", "b")]
    storage.remove(handles[0])
    storage.remove_all()
    assert not any(storage.validity(h) for h in handles)
    assert storage.add("c").index == 0