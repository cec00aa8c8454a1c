from sqlalchemy import Column, ForeignKey, Integer, String, Boolean, DateTime, func
from sqlalchemy.sql import true
from splitledger.db.session import Base
from sqlalchemy.orm import relationship

class GroupMember(Base):
    __tablename__ = "group_members"

    id = Column(Integer, primary_key=True, index=True)

    group_id = Column(Integer, ForeignKey("groups.id", ondelete="CASCADE"), nullable=False)
    name = Column(String, nullable=False)
    joined_at = Column(DateTime(timezone=True), server_default=func.now())
    # removed members stay in place so old expenses keep resolving
    is_active = Column(Boolean, nullable=False, default=True, server_default=true())

    group = relationship("Group", back_populates="members")
