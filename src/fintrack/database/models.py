"""SQLAlchemy models for the relational export format."""

from datetime import datetime, UTC
from sqlalchemy import (
    CheckConstraint,
    Column,
    Date,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


class Category(Base):
    """Category model."""

    __tablename__ = "categories"

    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    name_localized = Column(String, nullable=True)
    type = Column(String, nullable=False)
    color = Column(String, nullable=False)
    is_default = Column(Integer, default=0, nullable=False)
    created_at = Column(DateTime, nullable=True)

    __table_args__ = (
        CheckConstraint("type IN ('income', 'expense')", name="ck_category_type"),
    )

    # Relationships
    transactions = relationship("Transaction", back_populates="category")


class Transaction(Base):
    """Transaction model."""

    __tablename__ = "transactions"

    id = Column(String, primary_key=True)
    amount = Column(Float, nullable=False)
    description = Column(String, nullable=True)
    # Dangling references are allowed; SQLite leaves foreign keys unenforced
    category_id = Column(String, ForeignKey("categories.id"), nullable=False)
    date = Column(Date, nullable=False)
    type = Column(String, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (
        CheckConstraint("type IN ('income', 'expense')", name="ck_transaction_type"),
    )

    # Relationships
    category = relationship("Category", back_populates="transactions")


class Setting(Base):
    """Key-value settings model."""

    __tablename__ = "settings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    key = Column(String, unique=True, nullable=False)
    value = Column(String, nullable=False)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
