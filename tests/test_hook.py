import pytest

from pescatocha.hook import Hook, HookKind


def test_kind_numbers_select_catalogs():
    for number in (1, 2, 3):
        hook = Hook(HookKind(number))
        hook.catch(number * 10)
        assert hook.catalog(number) == (number * 10,)


@pytest.mark.parametrize("kind", list(HookKind))
def test_catch_goes_to_own_catalog(kind):
    hook = Hook(kind)
    hook.catch(4)
    hook.catch(7)
    assert hook.catalog(kind) == (4, 7)
    for other in HookKind:
        if other is not kind:
            assert hook.catalog(other) == ()


def test_catch_ignores_duplicates():
    hook = Hook(HookKind.MEDIUM)
    for fish_id in (3, 5, 3, 5, 1):
        hook.catch(fish_id)
    assert hook.catalog(HookKind.MEDIUM) == (3, 5, 1)


def test_plain_hook_catches_nothing():
    hook = Hook()
    hook.catch(9)
    assert all(hook.catalog(k) == () for k in HookKind)


def test_catalog_accepts_number():
    hook = Hook(HookKind.HEAVY)
    hook.catch(8)
    assert hook.catalog(3) == (8,)


def test_catalog_rejects_unknown_kind():
    with pytest.raises(ValueError):
        Hook(HookKind.LIGHT).catalog(4)


def test_catalog_is_a_copy():
    hook = Hook(HookKind.LIGHT)
    hook.catch(2)
    snapshot = hook.catalog(HookKind.LIGHT)
    hook.catch(6)
    assert snapshot == (2,)
    assert hook.catalog(HookKind.LIGHT) == (2, 6)


def test_bait_power_is_kept():
    assert Hook(HookKind.LIGHT, bait_power=5).bait_power == 5