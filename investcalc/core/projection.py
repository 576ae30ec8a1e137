"""Forward projection of a balance under one of ten reinvestment/withdrawal strategies."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from investcalc.core.periods import round_currency
from investcalc.core.solver import annuity_payment
from investcalc.schemas.projection import ProjectionPoint, ProjectionSummary, StrategyConfig

logger = logging.getLogger(__name__)


class UnknownStrategyError(ValueError):
    def __init__(self, strategy: str):
        super().__init__(f"unknown strategy: {strategy!r}")
        self.strategy = strategy


@dataclass(frozen=True)
class Carry:
    """State handed from one period to the next (full precision)."""

    balance: float
    previous_profit: float


@dataclass(frozen=True)
class CashFlow:
    new_cash: float
    cash_out: float
    end_value: float


def strategy_cash_flow(
    strategy: StrategyConfig,
    carry: Carry,
    original_principal: float,
    rate: float,
    shield_inflation_rate: float,
    custom_amount: float = 0.0,
) -> CashFlow:
    """
    Cash in / cash out / end value for one non-bootstrap period.

    Cash-in strategies add money at the start of the period, then grow.
    Withdrawal strategies grow first, then take money out, never more than
    is available.
    """
    kind = strategy.strategy
    start_value = carry.balance
    grown = start_value * (1 + rate)

    if kind == "2x":
        new_cash = start_value
    elif kind == "repeat":
        new_cash = original_principal
    elif kind == "all-in":
        return CashFlow(new_cash=0.0, cash_out=0.0, end_value=grown)
    elif kind == "double-down":
        new_cash = carry.previous_profit
    elif kind == "shield-value":
        new_cash = start_value * shield_inflation_rate
    elif kind == "level-up":
        new_cash = strategy.levelUpAmount
    elif kind == "pay-yourself":
        # keep half of this period's growth invested, pay out the other half
        half_growth = (start_value * rate) / 2
        return CashFlow(new_cash=0.0, cash_out=half_growth, end_value=start_value + half_growth)
    elif kind == "capital-protect":
        # only the original principal stays invested
        excess = max(0.0, start_value - original_principal)
        cash_out = excess + original_principal * rate
        return CashFlow(new_cash=0.0, cash_out=cash_out, end_value=original_principal)
    elif kind == "take-salary":
        cash_out = min(strategy.salaryAmount, grown)
        return CashFlow(new_cash=0.0, cash_out=cash_out, end_value=max(0.0, grown - cash_out))
    elif kind == "custom":
        if custom_amount >= 0:
            new_cash = custom_amount
        else:
            cash_out = min(abs(custom_amount), grown)
            return CashFlow(new_cash=0.0, cash_out=cash_out, end_value=max(0.0, grown - cash_out))
    else:
        raise UnknownStrategyError(kind)

    return CashFlow(new_cash=new_cash, cash_out=0.0, end_value=(start_value + new_cash) * (1 + rate))


def custom_per_period_amount(strategy: StrategyConfig, reference_balance: float, periods: int, rate: float) -> float:
    """Solved per-period amount for the custom strategy; 0 for every other strategy."""
    if strategy.strategy != "custom":
        return 0.0
    return annuity_payment(reference_balance, strategy.targetAmount, periods, rate)


def _bootstrap(starting_balance: float, rate: float) -> Tuple[ProjectionPoint, Carry]:
    """Period 1: the bank starts empty and the starting balance is cashed in."""
    profit = starting_balance * rate
    end_value = starting_balance + profit
    point = ProjectionPoint(
        period=1,
        startValue=0.0,
        newCash=round_currency(starting_balance),
        totalInvested=round_currency(starting_balance),
        profit=round_currency(profit),
        afterGrowth=round_currency(end_value),
        cashOut=0.0,
        endValue=round_currency(end_value),
    )
    return point, Carry(balance=end_value, previous_profit=profit)


def _advance(
    period: int,
    carry: Carry,
    strategy: StrategyConfig,
    original_principal: float,
    rate: float,
    shield_inflation_rate: float,
    custom_amount: float,
) -> Tuple[ProjectionPoint, Carry]:
    start_value = carry.balance
    flow = strategy_cash_flow(
        strategy,
        carry,
        original_principal,
        rate,
        shield_inflation_rate,
        custom_amount,
    )

    total_invested = start_value + flow.new_cash
    # growth is earned on the topped-up balance only when cash went in
    base = total_invested if flow.new_cash > 0 else start_value
    profit = base * rate
    after_growth = base * (1 + rate)

    point = ProjectionPoint(
        period=period,
        startValue=round_currency(start_value),
        newCash=round_currency(flow.new_cash),
        totalInvested=round_currency(total_invested),
        profit=round_currency(profit),
        afterGrowth=round_currency(after_growth),
        cashOut=round_currency(flow.cash_out),
        endValue=round_currency(flow.end_value),
    )
    return point, Carry(balance=flow.end_value, previous_profit=profit)


def project_forward(
    starting_balance: float,
    original_principal: float,
    strategy: StrategyConfig,
    per_period_rate: float,
    shield_inflation_rate: float,
    periods: int,
    reference_balance: Optional[float] = None,
    custom_amount: Optional[float] = None,
) -> List[ProjectionPoint]:
    """
    Project `periods` periods forward from `starting_balance`.

    `reference_balance` is the balance the custom strategy solves from; it
    defaults to `starting_balance`. A precomputed `custom_amount` is used
    as-is instead of solving. Output rows are rounded to whole units, the
    balance carried between periods is not.
    """
    if periods <= 0:
        return []

    if custom_amount is None:
        custom_amount = custom_per_period_amount(
            strategy,
            starting_balance if reference_balance is None else reference_balance,
            periods,
            per_period_rate,
        )

    logger.debug(
        "projecting %d periods with strategy=%s rate=%.6f", periods, strategy.strategy, per_period_rate
    )

    point, carry = _bootstrap(starting_balance, per_period_rate)
    rows: List[ProjectionPoint] = [point]
    for period in range(2, periods + 1):
        point, carry = _advance(
            period,
            carry,
            strategy,
            original_principal,
            per_period_rate,
            shield_inflation_rate,
            custom_amount,
        )
        rows.append(point)
    return rows


def summarize_projection(rows: List[ProjectionPoint]) -> ProjectionSummary:
    """Aggregate the rounded rows the way they are displayed."""
    total_cash_out = sum(row.cashOut for row in rows)
    total_new_cash = sum(row.newCash for row in rows)
    return ProjectionSummary(
        totalCashOut=total_cash_out,
        totalNewCash=total_new_cash,
        totalProfit=sum(row.profit for row in rows),
        finalValue=rows[-1].endValue if rows else 0.0,
        netCashFlow=total_cash_out - total_new_cash,
    )
