"""ORM model for stored payment cards (display data only, no card numbers)."""

from sqlalchemy import Boolean, Column, ForeignKey, Index, Integer, String, text

from app.models.base import Base, TimestampMixin


class PaymentMethod(TimestampMixin, Base):
    """At most one default card per user, enforced by a partial unique index."""

    __tablename__ = "payment_methods"
    __table_args__ = (
        Index(
            "uq_payment_methods_user_default",
            "user_id",
            unique=True,
            postgresql_where=text("is_default"),
            sqlite_where=text("is_default"),
        ),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    type = Column(String(32), nullable=False)
    last4 = Column(String(4), nullable=False)
    expiry_month = Column(Integer, nullable=False)
    expiry_year = Column(Integer, nullable=False)
    is_default = Column(Boolean, nullable=False, default=False)
