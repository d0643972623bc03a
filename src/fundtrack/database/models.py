"""SQLAlchemy models for fundtrack database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Date,
    Numeric,
    Boolean,
    CheckConstraint,
    Engine,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()

MONEY = Numeric(14, 2)


class BankAccount(Base):
    """Bank account model."""

    __tablename__ = "bank_accounts"

    id = Column(Integer, primary_key=True)
    account_number = Column(String, unique=True, nullable=False)
    balance = Column(MONEY, default=0, nullable=False)


class Transaction(Base):
    """Transaction model."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    description = Column(String, nullable=True)
    amount = Column(MONEY, nullable=False)
    category = Column(String, nullable=True)
    date = Column(DateTime(timezone=True), default=lambda: datetime.now(UTC), nullable=False)
    type = Column(String, nullable=False, default="expense")
    source_account_id = Column(Integer, ForeignKey("bank_accounts.id"), nullable=True)
    destination_account_id = Column(Integer, ForeignKey("bank_accounts.id"), nullable=True)
    debt_id = Column(Integer, ForeignKey("debts.id"), nullable=True)

    __table_args__ = (
        CheckConstraint(
            "type IN ('income', 'expense', 'self-transfer', 'debt')", name="ck_transaction_type"
        ),
    )

    # Relationships
    source_account = relationship("BankAccount", foreign_keys=[source_account_id])
    destination_account = relationship("BankAccount", foreign_keys=[destination_account_id])
    debt = relationship("Debt", back_populates="transactions")


class Debt(Base):
    """Debt model with optional recurrence settings."""

    __tablename__ = "debts"

    id = Column(Integer, primary_key=True)
    description = Column(String, nullable=False)
    total_amount = Column(MONEY, nullable=False)
    settled_amount = Column(MONEY, nullable=False)
    pending_amount = Column(MONEY, nullable=False)
    status = Column(String, nullable=False, default="pending")
    type = Column(String, nullable=False, default="positive")
    date = Column(DateTime(timezone=True), default=lambda: datetime.now(UTC), nullable=False)
    debtor = Column(String, nullable=True)
    debtor_account_id = Column(Integer, ForeignKey("bank_accounts.id"), nullable=True)
    creditor = Column(String, nullable=True)
    creditor_account_id = Column(Integer, ForeignKey("bank_accounts.id"), nullable=True)
    is_recurring = Column(Boolean, default=False, nullable=False)
    recurrence_frequency = Column(String, nullable=True)
    recurrence_interval = Column(Integer, nullable=True)
    recurrence_next_due_date = Column(Date, nullable=True)

    __table_args__ = (
        CheckConstraint("status IN ('pending', 'settled')", name="ck_debt_status"),
        CheckConstraint("type IN ('negative', 'positive')", name="ck_debt_type"),
    )

    # Relationships
    debtor_account = relationship("BankAccount", foreign_keys=[debtor_account_id])
    creditor_account = relationship("BankAccount", foreign_keys=[creditor_account_id])
    transactions = relationship("Transaction", back_populates="debt")


def create_db_engine(database_url: str) -> Engine:
    """Create a SQLAlchemy engine.

    SQLite connections are shared across the server's worker threads, so
    the same-thread check is turned off for them.
    """
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(database_url, echo=False, connect_args=connect_args)


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory bound to ``engine``."""
    return sessionmaker(bind=engine, expire_on_commit=False)
