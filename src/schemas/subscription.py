from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CreateSubscriptionRequest(BaseModel):
    student_name: str
    student_email: Optional[str] = None
    subject: str
    teacher: Optional[str] = None
    price: float = Field(default=0, ge=0)
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    status: Optional[str] = None
    payment_status: Optional[str] = None
    payment_method: Optional[str] = None


class UpdateSubscriptionRequest(BaseModel):
    student_name: Optional[str] = None
    student_email: Optional[str] = None
    subject: Optional[str] = None
    teacher: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=0)
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    status: Optional[str] = None
    payment_status: Optional[str] = None
    payment_method: Optional[str] = None


class Subscription(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    subscription_id: str
    owner_id: str
    student_name: str
    student_email: Optional[str] = None
    subject: str
    teacher: Optional[str] = None
    price: float = 0
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    status: Optional[str] = None
    payment_status: Optional[str] = None
    payment_method: Optional[str] = None
    created_at: str
    updated_at: str
