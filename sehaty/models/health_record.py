from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, Text, JSON, Enum as SQLEnum
from sqlalchemy.orm import relationship
import enum

from ..core.database import Base

class HealthRecordType(str, enum.Enum):
    LAB_RESULT = "lab_result"
    DIAGNOSIS = "diagnosis"
    TREATMENT = "treatment"
    VACCINATION = "vaccination"

class HealthRecord(Base):
    __tablename__ = "health_records"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    type = Column(SQLEnum(HealthRecordType, values_callable=lambda e: [m.value for m in e]), nullable=False)
    date = Column(DateTime, nullable=False)
    provider = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
    attachments = Column(JSON, default=list)

    user = relationship("User", back_populates="health_records")

    def __repr__(self):
        return f"<HealthRecord(id={self.id}, user_id={self.user_id}, type='{self.type}')>"
