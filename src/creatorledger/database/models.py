"""SQLAlchemy models for creatorledger database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Date,
    Numeric,
    UniqueConstraint,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


class Event(Base):
    """Event (gig) model."""

    __tablename__ = "events"

    id = Column(String(36), primary_key=True)
    event_date = Column(Date, nullable=False, index=True)
    client_name = Column(String(200), nullable=False)
    description = Column(String(1000), nullable=False)

    # Relationships
    incomes = relationship("Income", back_populates="event")


class Income(Base):
    """Income model."""

    __tablename__ = "incomes"

    id = Column(String(36), primary_key=True)
    owner = Column(String, nullable=False, index=True)
    event_id = Column(String(36), ForeignKey("events.id"), nullable=False, index=True)
    amount = Column(Numeric(19, 2), nullable=False)
    currency = Column(String(3), nullable=False)
    description = Column(String(1000), nullable=False)
    received_date = Column(Date, nullable=False)
    status = Column(String(20), nullable=False)

    # Relationships
    event = relationship("Event", back_populates="incomes")


class Expense(Base):
    """Expense model."""

    __tablename__ = "expenses"

    id = Column(String(36), primary_key=True)
    owner = Column(String, nullable=False, index=True)
    amount = Column(Numeric(19, 2), nullable=False)
    currency = Column(String(3), nullable=False)
    category = Column(String(50), nullable=False)
    description = Column(String(1000), nullable=False)
    incurred_date = Column(Date, nullable=False)


class TaxYearSummary(Base):
    """Generated tax year summary model."""

    __tablename__ = "tax_year_summaries"

    id = Column(String(36), primary_key=True)
    owner = Column(String, nullable=False, index=True)
    tax_year_start = Column(Integer, nullable=False)
    currency = Column(String(3), nullable=False)
    total_income = Column(Numeric(19, 2), nullable=False)
    total_expenses = Column(Numeric(19, 2), nullable=False)
    generated_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    category_totals = relationship(
        "TaxYearSummaryCategoryTotal",
        back_populates="summary",
        cascade="all, delete-orphan",
    )


class TaxYearSummaryCategoryTotal(Base):
    """Per-category total belonging to a summary."""

    __tablename__ = "tax_year_summary_category_totals"

    id = Column(Integer, primary_key=True)
    summary_id = Column(String(36), ForeignKey("tax_year_summaries.id"), nullable=False)
    category = Column(String(50), nullable=False)
    amount = Column(Numeric(19, 2), nullable=False)

    __table_args__ = (UniqueConstraint("summary_id", "category", name="uq_summary_category"),)

    # Relationships
    summary = relationship("TaxYearSummary", back_populates="category_totals")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
