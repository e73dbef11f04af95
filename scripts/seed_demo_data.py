"""Seed the registry database and the local demo state with the fixed sample dataset."""
from __future__ import annotations

import logging
import sys
from datetime import date
from pathlib import Path

from sqlalchemy import select
from sqlalchemy.orm import Session

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from share_registry.core.config import get_settings
from share_registry.core.logging import configure_logging
from share_registry.db.session import engine, session_scope
from share_registry.models import Base, DmatAccount, Shareholder, Transfer
from share_registry.services.demo_store import DemoStore, JsonFileStorage, build_seed_data

logger = logging.getLogger(__name__)


def seed(session: Session, today: date) -> None:
    """Insert the sample DMAT accounts, people and transfers unless they already exist."""

    existing_accounts = set(session.scalars(select(DmatAccount.account_number)))
    existing_emails = set(session.scalars(select(Shareholder.email)))
    data = build_seed_data(today)

    account_ids: dict[str, str] = {}
    for sample in data["dmat_accounts"]:
        if sample.account_number in existing_accounts:
            logger.info("DMAT account %s already exists", sample.account_number)
            continue
        account = DmatAccount(
            account_number=sample.account_number,
            holder_name=sample.holder_name,
            expiry_date=sample.expiry_date,
            renewal_status=sample.renewal_status,
        )
        session.add(account)
        session.flush()
        account_ids[sample.id] = account.id
        logger.info("Added DMAT account %s", sample.account_number)

    person_ids: dict[str, str] = {}
    for person in data["people"]:
        if person.email in existing_emails:
            logger.info("Shareholder %s already exists", person.email)
            continue
        shareholder = Shareholder(
            name=person.name,
            email=person.email,
            phone=person.phone,
            pan=person.pan,
            type=person.type,
            linked_dmat_account_id=account_ids.get(person.dmat_account_id or ""),
        )
        session.add(shareholder)
        session.flush()
        person_ids[person.id] = shareholder.id
        logger.info("Added shareholder %s", person.email)

    for sample in data["transfers"]:
        if sample.person_id not in person_ids:
            continue
        session.add(
            Transfer(
                person_id=person_ids[sample.person_id],
                person_type=sample.person_type,
                person_name=sample.person_name,
                company=sample.company,
                transfer_date=sample.transfer_date,
                status=sample.status,
                expected_credit_date=sample.expected_credit_date,
                moved_to_ipf=sample.moved_to_ipf,
                dividends_received=sample.dividends_received,
                pending_dividends=sample.pending_dividends,
                bonus_shares=sample.bonus_shares,
            )
        )
        logger.info("Added transfer for %s (%s)", sample.person_name, sample.company)


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_config_path, settings.log_level)
    today = date.today()
    Base.metadata.create_all(bind=engine)
    with session_scope() as session:
        seed(session, today)

    store = DemoStore(JsonFileStorage(settings.demo_state_path))
    if not store.seed_once(today):
        logger.info("Demo state already seeded")


if __name__ == "__main__":
    main()
