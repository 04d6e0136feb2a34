"""SQLAlchemy ORM models"""

from sqlalchemy import Column, String, BigInteger, DateTime, Integer, Text
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class DisbursementRecord(Base):
    """Loan payout to a borrower's bank account"""

    __tablename__ = "disbursement"

    id = Column(String(32), primary_key=True)
    loan_id = Column(String(32), nullable=False, index=True)
    applicant_name = Column(Text, nullable=False)
    amount = Column(BigInteger, nullable=False)
    approved_amount = Column(BigInteger, nullable=False)
    disbursed_amount = Column(BigInteger, nullable=False, default=0)
    bank_name = Column(Text, nullable=False)
    account_number = Column(String(32), nullable=False)  # masked, e.g. ****1234
    ifsc_code = Column(String(11), nullable=False)
    method = Column(String(8), nullable=False)
    processing_fee = Column(BigInteger, nullable=False, default=0)
    gst = Column(BigInteger, nullable=False, default=0)
    net_disbursement = Column(BigInteger, nullable=False)
    status = Column(String(16), nullable=False, default="pending", index=True)
    retry_count = Column(Integer, nullable=False, default=0)
    utr_number = Column(String(32), nullable=True)
    disbursement_date = Column(DateTime(timezone=True), nullable=True)
    failure_reason = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=True, onupdate=func.now())
