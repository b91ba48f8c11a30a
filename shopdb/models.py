import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import (
    Column, String, Text, ForeignKey, DateTime, func,
    Numeric, CheckConstraint, Index
)
from sqlalchemy.orm import relationship

from .columns import UnsignedBigInt
from .database import Base


@dataclass(frozen=True)
class TokenStatus:
    is_expired: bool
    message: str
    expires_at: Optional[datetime]


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes; they are stored as UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


# 👤 User
class User(Base):
    __tablename__ = "users"

    id = Column(UnsignedBigInt, primary_key=True, autoincrement=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    email_verified_at = Column(DateTime(timezone=True), nullable=True)
    email_verification_token = Column(String(255), nullable=True)
    email_verification_token_expires = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    orders = relationship("Order", back_populates="user", cascade="all, delete-orphan", passive_deletes=True)

    def verification_token_status(self, now: Optional[datetime] = None) -> TokenStatus:
        """Report whether the e-mail verification code can still be used.

        A user without an expiry has no pending code, which counts as expired.
        """
        expires = self.email_verification_token_expires
        if expires is None:
            return TokenStatus(
                is_expired=True,
                message="No verification token found. Please request a new verification code.",
                expires_at=None,
            )

        now = _as_utc(now or datetime.now(timezone.utc))
        expires = _as_utc(expires)
        if now > expires:
            return TokenStatus(
                is_expired=True,
                message="Verification code has expired. Please request a new one.",
                expires_at=expires,
            )

        minutes = math.ceil((expires - now).total_seconds() / 60)
        plural = "" if minutes == 1 else "s"
        return TokenStatus(
            is_expired=False,
            message=f"Verification code is valid for {minutes} more minute{plural}.",
            expires_at=expires,
        )

    def is_verification_token_expired(self, now: Optional[datetime] = None) -> bool:
        return self.verification_token_status(now).is_expired


class Product(Base):
    __tablename__ = "products"

    id = Column(UnsignedBigInt, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Numeric(10, 2), nullable=False)         # 💰 exact money
    # stock lives in the inventory tables since 20250912131234

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_products_price_nonneg"),
    )


class Order(Base):
    __tablename__ = "orders"

    id = Column(UnsignedBigInt, primary_key=True, autoincrement=True)
    user_id = Column(UnsignedBigInt, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    total_amount = Column(Numeric(10, 2), nullable=False, default=0)
    payment_status = Column(String(20), nullable=False, default="pending")  # pending/paid/failed
    order_status = Column(String(20), nullable=False, default="pending")  # pending/processing/shipped/delivered/cancelled
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    user = relationship("User", back_populates="orders")
    order_info = relationship(
        "OrderInfo",
        back_populates="order",
        uselist=False,
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        CheckConstraint("total_amount >= 0", name="ck_orders_total_nonneg"),
        Index("ix_orders_user_created", "user_id", "created_at"),
    )


class OrderInfo(Base):
    """Free-text notes attached to an order, at most one row per order.

    Rows are written once; there is no ``updated_at``.
    """

    __tablename__ = "order_info"

    id = Column(UnsignedBigInt, primary_key=True, autoincrement=True)
    order_id = Column(
        UnsignedBigInt,
        ForeignKey("orders.id", name="order_info_ibfk_1", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False,
        unique=True,
    )
    info = Column(Text, nullable=True, comment="Additional order information or notes")
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    order = relationship("Order", back_populates="order_info")
