from datetime import datetime

from sqlalchemy.orm import Session

from app.core.repository import BaseRepository
from app.transactions.models.transaction import Transaction


class TransactionRepository(BaseRepository[Transaction]):
    def __init__(self, db: Session):
        super().__init__(db, Transaction)

    def find_since(self, since: datetime) -> list[Transaction]:
        """Transactions after `since` that grant a project, newest first."""
        return (
            self.db.query(Transaction)
            .filter(
                Transaction.timestamp > since,
                Transaction.project_grant_slug.isnot(None),
            )
            .order_by(Transaction.timestamp.desc(), Transaction.id.desc())
            .all()
        )
