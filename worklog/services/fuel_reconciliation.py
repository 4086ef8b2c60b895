"""Shared fuel tank balance.

The tank balance is never stored. It is the sum of every tank load minus the
sum of every refill dispensed from the tank, recomputed from the rows of one
organization on each call.
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable
import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..models import FuelRefill, FuelTankLoad
from .numbers import ZERO, parse_decimal, to_decimal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RefillGap:
    refill_id: int
    expected_liters_before: Decimal
    liters_before: Decimal
    difference: Decimal


@dataclass
class TankConsistency:
    remaining: Decimal
    negative_balance: bool
    gaps: list[RefillGap] = field(default_factory=list)


def remaining_liters(
    load_liters: Iterable, refilled_liters: Iterable
) -> Decimal:
    loaded = sum((to_decimal(value) for value in load_liters), ZERO)
    dispensed = sum((to_decimal(value) for value in refilled_liters), ZERO)
    return loaded - dispensed


def compute_remaining_liters(db: Session, organization_id: int) -> Decimal:
    loads = db.scalars(
        select(FuelTankLoad.liters).where(
            FuelTankLoad.organization_id == organization_id
        )
    ).all()
    refills = db.scalars(
        select(FuelRefill.liters_refilled).where(
            FuelRefill.organization_id == organization_id
        )
    ).all()
    # Negative balances are reported as-is so data entry errors stay visible.
    return remaining_liters(loads, refills)


def compute_dispensed(liters_before, liters_after) -> Decimal | None:
    before = parse_decimal(liters_before)
    after = parse_decimal(liters_after)
    if before is None or after is None:
        return None
    return after - before


def last_refill(db: Session, organization_id: int) -> FuelRefill | None:
    return db.scalars(
        select(FuelRefill)
        .where(FuelRefill.organization_id == organization_id)
        .order_by(FuelRefill.refill_date.desc(), FuelRefill.id.desc())
        .limit(1)
    ).first()


def suggest_liters_before(db: Session, organization_id: int) -> Decimal | None:
    refill = last_refill(db, organization_id)
    if refill is None or refill.liters_after is None:
        return None
    return refill.liters_after


def find_refill_gaps(refills: Iterable[FuelRefill]) -> list[RefillGap]:
    """Refills whose starting level does not match the previous refill's end level.

    Refills are walked in ``refill_date`` order (id breaks ties). The first
    refill has nothing to compare against and is never reported.
    """
    ordered = sorted(refills, key=lambda refill: (refill.refill_date, refill.id))
    gaps: list[RefillGap] = []
    previous = None
    for refill in ordered:
        if previous is not None:
            expected = to_decimal(previous.liters_after)
            actual = to_decimal(refill.liters_before)
            if expected != actual:
                gaps.append(
                    RefillGap(
                        refill_id=refill.id,
                        expected_liters_before=expected,
                        liters_before=actual,
                        difference=actual - expected,
                    )
                )
        previous = refill
    return gaps


def check_consistency(db: Session, organization_id: int) -> TankConsistency:
    remaining = compute_remaining_liters(db, organization_id)
    refills = db.scalars(
        select(FuelRefill).where(FuelRefill.organization_id == organization_id)
    ).all()
    gaps = find_refill_gaps(refills)
    if remaining < 0 or gaps:
        logger.warning(
            "Fuel tank inconsistency for organization_id=%s: remaining=%s gaps=%s",
            organization_id,
            remaining,
            len(gaps),
        )
    return TankConsistency(
        remaining=remaining, negative_balance=remaining < 0, gaps=gaps
    )
