import pytest
from services.checkout.app.services.checkout_factory import enforce_address_owner


def test_address_owner_policy_defaults_to_off(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CHECKOUT_ENFORCE_ADDRESS_OWNER", raising=False)
    assert enforce_address_owner() is False


@pytest.mark.parametrize("raw", ["1", "true", "YES", " y "])
def test_address_owner_policy_truthy(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("CHECKOUT_ENFORCE_ADDRESS_OWNER", raw)
    assert enforce_address_owner() is True


def test_address_owner_policy_rejects_unknown(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CHECKOUT_ENFORCE_ADDRESS_OWNER", "nope")
    with pytest.raises(ValueError, match="Unknown CHECKOUT_ENFORCE_ADDRESS_OWNER"):
        enforce_address_owner()
