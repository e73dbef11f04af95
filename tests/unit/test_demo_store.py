from __future__ import annotations

import json
import random
from datetime import date
from pathlib import Path

from share_registry.models import RenewalStatus, ShareholderType, TransferStatus
from share_registry.services.demo_store import (
    Action,
    ActionType,
    DemoState,
    DemoStore,
    JsonFileStorage,
    Person,
    Role,
    User,
    build_seed_data,
    new_transfer,
    reduce,
    seed_pan,
    seed_phone,
)

TODAY = date(2025, 3, 1)


def _store(tmp_path: Path) -> DemoStore:
    return DemoStore(JsonFileStorage(tmp_path / "state.json"))


def test_seed_is_deterministic() -> None:
    first = build_seed_data(TODAY)
    second = build_seed_data(TODAY)

    assert first == second
    assert len(first["people"]) == 12
    assert len(first["dmat_accounts"]) == 10
    assert [transfer.id for transfer in first["transfers"]] == ["tr_001", "tr_002"]
    assert first["people"][0].pan == "ADHLP000T"
    assert first["people"][0].dmat_account_id == "d_001"
    assert first["people"][11].dmat_account_id is None
    statuses = [account.renewal_status for account in first["dmat_accounts"]]
    assert statuses[:3] == [RenewalStatus.EXPIRED, RenewalStatus.EXPIRED, RenewalStatus.EXPIRING]
    assert statuses[5] is RenewalStatus.ACTIVE


def test_seed_identifiers_follow_patterns() -> None:
    assert seed_pan(0) == "ADHLP000T"
    assert seed_pan(1)[5:8] == "001"
    assert seed_phone(0) == "9870000000"
    assert all(len(seed_phone(index)) == 10 for index in range(12))


def test_seed_once_only_into_empty_store(tmp_path: Path) -> None:
    store = _store(tmp_path)

    assert store.seed_once(TODAY) is True
    assert store.seed_once(TODAY) is False
    assert len(store.state.people) == 12


def test_seed_skipped_when_any_collection_has_data(tmp_path: Path) -> None:
    store = _store(tmp_path)
    person = Person(id="p_x", type=ShareholderType.SHAREHOLDER, name="X", email="x@example.com", phone="1", pan="P")
    store.dispatch(Action(ActionType.UPSERT_PERSON, person))

    assert store.seed_once(TODAY) is False
    assert store.state.people == [person]


def test_state_survives_restart(tmp_path: Path) -> None:
    store = _store(tmp_path)
    store.seed_once(TODAY)
    store.dispatch(Action(ActionType.SIGN_IN, User(id="u1", name="Admin", email="admin@smmpro.app", role=Role.ADMIN)))

    reloaded = _store(tmp_path)

    assert reloaded.state == store.state
    assert reloaded.is_admin is True


def test_upsert_replaces_by_id_and_delete_removes() -> None:
    person = Person(id="p_1", type=ShareholderType.SHAREHOLDER, name="A", email="a@example.com", phone="1", pan="P")
    renamed = person.model_copy(update={"name": "B"})

    state = reduce(DemoState(), Action(ActionType.UPSERT_PERSON, person))
    state = reduce(state, Action(ActionType.UPSERT_PERSON, renamed))
    assert state.people == [renamed]

    state = reduce(state, Action(ActionType.DELETE_PERSON, "p_1"))
    assert state.people == []


def test_sign_out_clears_user() -> None:
    user = User(id="u1", name="S", email="s@example.com", role=Role.SHAREHOLDER)
    state = reduce(DemoState(), Action(ActionType.SIGN_IN, user))

    assert reduce(state, Action(ActionType.SIGN_OUT)).current_user is None


def test_corrupt_state_file_starts_empty(tmp_path: Path) -> None:
    path = tmp_path / "state.json"
    path.write_text("{not json", encoding="utf-8")

    store = DemoStore(JsonFileStorage(path))

    assert store.state == DemoState()


def test_state_file_uses_camel_case(tmp_path: Path) -> None:
    store = _store(tmp_path)
    store.seed_once(TODAY)

    raw = json.loads((tmp_path / "state.json").read_text(encoding="utf-8"))

    assert set(raw) == {"currentUser", "people", "dmatAccounts", "transfers", "emailLog"}
    assert "movedToIPF" in raw["transfers"][0]


def test_new_transfer_generates_ipf_figures() -> None:
    person = build_seed_data(TODAY)["people"][2]

    plain = new_transfer(person, company="HDFC", transfer_date=TODAY)
    moved = new_transfer(
        person,
        company="HDFC",
        transfer_date=TODAY,
        status=TransferStatus.COMPLETED,
        moved_to_ipf=True,
        rng=random.Random(7),
    )

    assert plain.dividends_received is None
    assert plain.id.startswith("tr_")
    assert moved.dividends_received is not None
    assert moved.bonus_shares is not None and 0 <= moved.bonus_shares <= 4
    assert moved.person_name == person.name
