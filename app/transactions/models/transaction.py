import enum
from datetime import UTC, datetime
from decimal import Decimal

from sqlalchemy import Enum, ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.session import Base


class PaymentProcessor(str, enum.Enum):
    PAYPAL = "paypal"
    STRIPE = "stripe"


class Transaction(Base):
    __tablename__ = "transactions"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    processor: Mapped[PaymentProcessor] = mapped_column(
        Enum(PaymentProcessor, values_callable=lambda obj: [e.value for e in obj]),
        default=PaymentProcessor.STRIPE,
    )
    timestamp: Mapped[datetime] = mapped_column(default=lambda: datetime.now(UTC), index=True)
    email: Mapped[str | None] = mapped_column(String(255), default=None, index=True)

    amount: Mapped[Decimal] = mapped_column(Numeric(12, 2))
    currency: Mapped[str] = mapped_column(String(3), default="GBP")
    marketplace: Mapped[str | None] = mapped_column(default=None)
    transaction_reference: Mapped[str | None] = mapped_column(
        default=None, unique=True, index=True
    )

    passed_validation: Mapped[bool] = mapped_column(default=False)
    refunded: Mapped[bool] = mapped_column(default=False)

    # Set only for purchases that unlock a restricted project
    project_grant_slug: Mapped[str | None] = mapped_column(
        ForeignKey("projects.slug", ondelete="SET NULL"), default=None, index=True
    )

    project_grant = relationship("Project")

    def __repr__(self) -> str:
        return (
            f"<Transaction(id={self.id}, amount={self.amount}, "
            f"project_grant={self.project_grant_slug})>"
        )
