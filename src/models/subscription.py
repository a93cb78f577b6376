from sqlalchemy import Column, Float, String
from .base import Base


class SubscriptionModel(Base):
    __tablename__ = "subscriptions"

    subscription_id = Column(String, primary_key=True, index=True)
    owner_id = Column(String, index=True, nullable=False)
    student_name = Column(String, nullable=False)
    student_email = Column(String, nullable=True)
    subject = Column(String, nullable=False)
    teacher = Column(String, nullable=True)
    price = Column(Float, nullable=False, default=0)
    start_date = Column(String, nullable=True)
    end_date = Column(String, nullable=True)
    status = Column(String, nullable=True)
    payment_status = Column(String, nullable=True)
    payment_method = Column(String, nullable=True)
    created_at = Column(String, nullable=False)
    updated_at = Column(String, nullable=False)
