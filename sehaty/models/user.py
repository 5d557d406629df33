from sqlalchemy import Column, Integer, String, DateTime, Boolean, Float, Text, Enum as SQLEnum
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from ..core.database import Base
from ..core.security import UserRole

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    role = Column(SQLEnum(UserRole, values_callable=lambda e: [m.value for m in e]), nullable=False, index=True)
    is_active = Column(Boolean, default=True)

    # Contact information
    phone_number = Column(String(20), nullable=True)
    address = Column(String(255), nullable=True)

    # Patient fields
    date_of_birth = Column(DateTime, nullable=True)
    gender = Column(String(20), nullable=True)
    insurance_provider = Column(String(255), nullable=True)

    # Doctor / clinic fields
    specialty = Column(String(100), nullable=True, index=True)
    location = Column(String(255), nullable=True)
    license_number = Column(String(50), nullable=True)
    contact_info = Column(String(255), nullable=True)
    clinic_name = Column(String(255), nullable=True)
    website = Column(String(255), nullable=True)
    bio = Column(Text, nullable=True)
    rating = Column(Float, default=0.0)

    last_login = Column(DateTime, nullable=True)

    # Timestamps
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    # Owned records
    appointments = relationship(
        "Appointment",
        foreign_keys="Appointment.patient_id",
        back_populates="patient",
        cascade="all, delete-orphan",
    )
    doctor_appointments = relationship(
        "Appointment",
        foreign_keys="Appointment.doctor_id",
        back_populates="doctor",
    )
    prescriptions = relationship("Prescription", back_populates="user", cascade="all, delete-orphan")
    health_records = relationship("HealthRecord", back_populates="user", cascade="all, delete-orphan")
    recent_activities = relationship("Activity", back_populates="user", cascade="all, delete-orphan")
    notifications = relationship("Notification", back_populates="user", cascade="all, delete-orphan")
    complaints = relationship("Complaint", back_populates="user", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}', role='{self.role}')>"
