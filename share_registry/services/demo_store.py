"""File-backed demo state used by the dashboard and report pages without a database.

The store is a reducer over five slices (signed-in user, people, DMAT
accounts, transfers, e-mail log). Every dispatched action produces a new
state which is written whole to the configured JSON file; construction
rehydrates from that file. Nothing here touches the registry database.
"""
from __future__ import annotations

import enum
import json
import logging
import random
import uuid
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal
from pathlib import Path
from typing import Any, TypeVar

from pydantic import Field, ValidationError

from share_registry.models.dmat_account import RenewalStatus
from share_registry.models.shareholder import ShareholderType
from share_registry.models.transfer import TransferStatus
from share_registry.schemas.common import RegistryModel
from share_registry.services.dmat_accounts import derive_renewal_status

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=RegistryModel)


class Role(str, enum.Enum):
    ADMIN = "Admin"
    SHAREHOLDER = "Shareholder"
    STOCKHOLDER = "Stockholder"


class User(RegistryModel):
    id: str
    name: str
    email: str
    role: Role


class Person(RegistryModel):
    id: str
    type: ShareholderType
    name: str
    email: str
    phone: str
    pan: str
    dmat_account_id: str | None = None


class DemoDmatAccount(RegistryModel):
    id: str
    account_number: str
    holder_name: str
    expiry_date: date
    renewal_status: RenewalStatus


class DemoTransfer(RegistryModel):
    id: str
    person_id: str
    person_type: ShareholderType
    person_name: str
    company: str
    transfer_date: date
    status: TransferStatus
    expected_credit_date: date | None = None
    moved_to_ipf: bool = Field(default=False, alias="movedToIPF")
    dividends_received: Decimal | None = None
    pending_dividends: Decimal | None = None
    bonus_shares: int | None = None


class EmailLogEntry(RegistryModel):
    id: str
    to: str
    subject: str
    body_preview: str
    created_at: str


class DemoState(RegistryModel):
    current_user: User | None = None
    people: list[Person] = Field(default_factory=list)
    dmat_accounts: list[DemoDmatAccount] = Field(default_factory=list)
    transfers: list[DemoTransfer] = Field(default_factory=list)
    email_log: list[EmailLogEntry] = Field(default_factory=list)


class ActionType(str, enum.Enum):
    SIGN_IN = "SIGN_IN"
    SIGN_OUT = "SIGN_OUT"
    UPSERT_PERSON = "UPSERT_PERSON"
    DELETE_PERSON = "DELETE_PERSON"
    UPSERT_DMAT = "UPSERT_DMAT"
    DELETE_DMAT = "DELETE_DMAT"
    UPSERT_TRANSFER = "UPSERT_TRANSFER"
    UPSERT_EMAIL_LOG = "UPSERT_EMAIL_LOG"
    SEED = "SEED"


@dataclass(frozen=True, slots=True)
class Action:
    type: ActionType
    payload: Any = None


def create_id(prefix: str = "id") -> str:
    return f"{prefix}_{uuid.uuid4().hex[:7]}"


def _upsert(items: Sequence[R], item: R, key: Callable[[R], str] = lambda entry: entry.id) -> list[R]:
    wanted = key(item)
    updated = list(items)
    for index, existing in enumerate(updated):
        if key(existing) == wanted:
            updated[index] = item
            return updated
    updated.append(item)
    return updated


def reduce(state: DemoState, action: Action) -> DemoState:
    """Apply one action and return the next state; unknown actions leave it unchanged."""

    match action.type:
        case ActionType.SIGN_IN:
            return state.model_copy(update={"current_user": action.payload})
        case ActionType.SIGN_OUT:
            return state.model_copy(update={"current_user": None})
        case ActionType.UPSERT_PERSON:
            return state.model_copy(update={"people": _upsert(state.people, action.payload)})
        case ActionType.DELETE_PERSON:
            people = [person for person in state.people if person.id != action.payload]
            return state.model_copy(update={"people": people})
        case ActionType.UPSERT_DMAT:
            return state.model_copy(update={"dmat_accounts": _upsert(state.dmat_accounts, action.payload)})
        case ActionType.DELETE_DMAT:
            accounts = [account for account in state.dmat_accounts if account.id != action.payload]
            return state.model_copy(update={"dmat_accounts": accounts})
        case ActionType.UPSERT_TRANSFER:
            return state.model_copy(update={"transfers": _upsert(state.transfers, action.payload)})
        case ActionType.UPSERT_EMAIL_LOG:
            return state.model_copy(update={"email_log": list(action.payload)})
        case ActionType.SEED:
            return state.model_copy(update=dict(action.payload))
    return state


class JsonFileStorage:
    """Persists the whole demo state as one JSON document."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> DemoState:
        if not self._path.exists():
            return DemoState()
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
            return DemoState.model_validate({**DemoState().model_dump(by_alias=True), **raw})
        except (OSError, ValueError, TypeError, ValidationError) as exc:
            logger.warning("Discarding unreadable demo state at %s: %s", self._path, exc)
            return DemoState()

    def save(self, state: DemoState) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(state.model_dump_json(by_alias=True), encoding="utf-8")


class DemoStore:
    """Explicit state container; callers construct one and pass it where needed."""

    def __init__(self, storage: JsonFileStorage) -> None:
        self._storage = storage
        self._state = storage.load()

    @property
    def state(self) -> DemoState:
        return self._state

    @property
    def role(self) -> Role | None:
        user = self._state.current_user
        return user.role if user else None

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN

    def dispatch(self, action: Action) -> DemoState:
        self._state = reduce(self._state, action)
        self._storage.save(self._state)
        return self._state

    def is_seeded(self) -> bool:
        state = self._state
        return bool(state.people or state.dmat_accounts or state.transfers)

    def seed_once(self, today: date | None = None) -> bool:
        """Load the fixed sample dataset unless any collection already has data."""

        if self.is_seeded():
            return False
        self.dispatch(Action(ActionType.SEED, build_seed_data(today or date.today())))
        logger.info("Seeded demo state at %s", self._storage.path)
        return True


_SEED_PEOPLE: tuple[tuple[str, str, ShareholderType], ...] = (
    ("Akanksha D.", "shareholder@smmpro.app", ShareholderType.SHAREHOLDER),
    ("Rahul K.", "rahul@example.com", ShareholderType.STOCKHOLDER),
    ("Meera S.", "meera@example.com", ShareholderType.SHAREHOLDER),
    ("Arjun P.", "arjun@example.com", ShareholderType.STOCKHOLDER),
    ("Priya N.", "priya@example.com", ShareholderType.SHAREHOLDER),
    ("Vikram R.", "vikram@example.com", ShareholderType.STOCKHOLDER),
    ("Sneha T.", "sneha@example.com", ShareholderType.SHAREHOLDER),
    ("Rohit M.", "rohit@example.com", ShareholderType.STOCKHOLDER),
    ("Isha K.", "isha@example.com", ShareholderType.SHAREHOLDER),
    ("Karan L.", "karan@example.com", ShareholderType.STOCKHOLDER),
    ("Devika B.", "devika@example.com", ShareholderType.SHAREHOLDER),
    ("Nitin H.", "stockholder@smmpro.app", ShareholderType.STOCKHOLDER),
)
_SEED_EXPIRY_OFFSETS = (-20, -5, 3, 7, 12, 25, 40, 60, 1, 9)


def _seed_letter(index: int, shift: int) -> str:
    return chr(ord("A") + (index + shift) % 26)


def seed_pan(index: int) -> str:
    """Five letters, three digits, one letter: ``ADHLP000T`` for the first person."""

    letters = "".join(_seed_letter(index, shift) for shift in (0, 3, 7, 11, 15))
    return f"{letters}{str(1000 + index)[1:]}{_seed_letter(index, 19)}"


def seed_phone(index: int) -> str:
    return f"98{str(700000000 + index * 12345)[:8]}"


def build_seed_data(today: date) -> dict[str, list[Any]]:
    people = [
        Person(
            id=f"p_{index + 1:03d}",
            type=holder_type,
            name=name,
            email=email,
            phone=seed_phone(index),
            pan=seed_pan(index),
        )
        for index, (name, email, holder_type) in enumerate(_SEED_PEOPLE)
    ]

    accounts: list[DemoDmatAccount] = []
    for index, (person, offset) in enumerate(zip(people, _SEED_EXPIRY_OFFSETS)):
        expiry = today + timedelta(days=offset)
        account = DemoDmatAccount(
            id=f"d_{index + 1:03d}",
            account_number=f"DMAT-{index + 1:03d}",
            holder_name=person.name,
            expiry_date=expiry,
            renewal_status=derive_renewal_status(expiry, today),
        )
        accounts.append(account)
        people[index] = person.model_copy(update={"dmat_account_id": account.id})

    transfers = [
        DemoTransfer(
            id="tr_001",
            person_id=people[0].id,
            person_type=people[0].type,
            person_name=people[0].name,
            company="INFY",
            transfer_date=today,
            status=TransferStatus.IN_PROCESS,
            expected_credit_date=today + timedelta(days=3),
            moved_to_ipf=False,
        ),
        DemoTransfer(
            id="tr_002",
            person_id=people[1].id,
            person_type=people[1].type,
            person_name=people[1].name,
            company="TCS",
            transfer_date=today,
            status=TransferStatus.COMPLETED,
            moved_to_ipf=True,
            dividends_received=Decimal("320.5"),
            pending_dividends=Decimal("120.0"),
            bonus_shares=1,
        ),
    ]
    return {"people": people, "dmat_accounts": accounts, "transfers": transfers}


def new_transfer(
    person: Person,
    *,
    company: str,
    transfer_date: date,
    status: TransferStatus = TransferStatus.INITIATED,
    expected_credit_date: date | None = None,
    moved_to_ipf: bool = False,
    rng: random.Random | None = None,
) -> DemoTransfer:
    """Build a demo transfer; IPF movements get placeholder dividend and bonus figures."""

    figures: dict[str, Any] = {}
    if moved_to_ipf:
        rng = rng or random.Random()
        figures = {
            "dividends_received": Decimal(rng.randint(0, 1000)) / 100,
            "pending_dividends": Decimal(rng.randint(0, 500)) / 100,
            "bonus_shares": rng.randint(0, 4),
        }
    return DemoTransfer(
        id=create_id("tr"),
        person_id=person.id,
        person_type=person.type,
        person_name=person.name,
        company=company,
        transfer_date=transfer_date,
        status=status,
        expected_credit_date=expected_credit_date,
        moved_to_ipf=moved_to_ipf,
        **figures,
    )


__all__ = [
    "Action",
    "ActionType",
    "DemoDmatAccount",
    "DemoState",
    "DemoStore",
    "DemoTransfer",
    "EmailLogEntry",
    "JsonFileStorage",
    "Person",
    "Role",
    "User",
    "build_seed_data",
    "create_id",
    "new_transfer",
    "reduce",
    "seed_pan",
    "seed_phone",
]
