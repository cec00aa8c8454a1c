from sqlalchemy import Column, Integer, Float, String, DateTime, ForeignKey
from sqlalchemy.sql import func
from splitledger.db.session import Base

class SettlementHistory(Base):
    __tablename__ = "settlement_history"

    id = Column(Integer, primary_key=True)
    group_id = Column(Integer, ForeignKey("groups.id", ondelete="CASCADE"), nullable=False)
    from_member = Column(Integer, ForeignKey("group_members.id"), nullable=False)
    to_member = Column(Integer, ForeignKey("group_members.id"), nullable=False)
    amount = Column(Float, nullable=False)
    currency = Column(String(3), nullable=False)
    note = Column(String, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
