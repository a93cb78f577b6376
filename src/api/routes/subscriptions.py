"""Subscription routes."""

from fastapi import APIRouter

from core.dependencies import CurrentPrincipal, SubscriptionManagerDep
from schemas.subscription import (
    CreateSubscriptionRequest,
    Subscription,
    UpdateSubscriptionRequest,
)

router = APIRouter(prefix="/api/subscriptions", tags=["Subscriptions"])


@router.get("", summary="List subscriptions")
def list_subscriptions(
    principal: CurrentPrincipal, manager: SubscriptionManagerDep
) -> dict:
    models = manager.list_for_owner(principal.subject_id)
    return {"subscriptions": [Subscription.model_validate(m) for m in models]}


@router.post("", summary="Create a subscription")
def create_subscription(
    req: CreateSubscriptionRequest,
    principal: CurrentPrincipal,
    manager: SubscriptionManagerDep,
) -> dict:
    model = manager.create_for_owner(principal.subject_id, req.model_dump())
    return {
        "message": "Subscription created successfully",
        "subscription": Subscription.model_validate(model),
    }


@router.put("/{subscription_id}", summary="Update a subscription")
def update_subscription(
    subscription_id: str,
    req: UpdateSubscriptionRequest,
    principal: CurrentPrincipal,
    manager: SubscriptionManagerDep,
) -> dict:
    model = manager.update_for_owner(
        principal.subject_id, subscription_id, req.model_dump(exclude_unset=True)
    )
    return {
        "message": "Subscription updated successfully",
        "subscription": Subscription.model_validate(model),
    }


@router.delete("/{subscription_id}", summary="Delete a subscription")
def delete_subscription(
    subscription_id: str,
    principal: CurrentPrincipal,
    manager: SubscriptionManagerDep,
) -> dict:
    manager.delete_for_owner(principal.subject_id, subscription_id)
    return {"message": "Subscription deleted successfully"}
