"""Strategy catalog: display names and plain-language descriptions."""

from __future__ import annotations

from typing import Dict

from investcalc.core.periods import format_currency as fmt
from investcalc.schemas.projection import StrategyConfig

STRATEGY_NAMES: Dict[str, str] = {
    "2x": "2X",
    "repeat": "Repeat",
    "all-in": "All In",
    "double-down": "Double Down",
    "shield-value": "Shield Value",
    "level-up": "Level Up",
    "pay-yourself": "Pay Yourself",
    "capital-protect": "Capital Protect",
    "take-salary": "Take Salary",
    "custom": "Custom",
}


def describe_strategy(
    strategy: StrategyConfig,
    balance: float,
    principal: float,
    profit: float,
    inflation_rate: float,
    per_period_amount: float = 0.0,
    periods: int = 0,
) -> str:
    """
    One-sentence explanation of what `strategy` does with the current numbers.

    `inflation_rate` is in percent; `per_period_amount` is the solved custom amount.
    """
    kind = strategy.strategy
    bal = fmt(balance)
    prof = fmt(profit)

    if kind == "2x":
        return f"Double your position. {bal} balance -> add {bal} more -> invest {fmt(balance * 2)} total."
    if kind == "repeat":
        return (
            f"Add your starting amount again. {bal} balance + {fmt(principal)} original "
            f"-> invest {fmt(balance + principal)}."
        )
    if kind == "all-in":
        return f"Just let it grow. {bal} stays in, no extra cash needed, no withdrawals."
    if kind == "double-down":
        return f"Add cash equal to your profit. Made {prof}? Add {prof} more -> invest {fmt(balance + profit)}."
    if kind == "shield-value":
        top_up = balance * (inflation_rate / 100)
        return (
            f"Beat inflation. Add {fmt(top_up)} top-up to protect your money's value "
            f"-> invest {fmt(balance + top_up)}."
        )
    if kind == "level-up":
        return (
            f"Add a fixed amount each time. {bal} balance + {fmt(strategy.levelUpAmount)} extra "
            f"-> invest {fmt(balance + strategy.levelUpAmount)}."
        )
    if kind == "pay-yourself":
        return (
            f"Take half your profit home. Made {prof}? Keep {fmt(profit / 2)}, reinvest the rest "
            f"-> invest {fmt(balance - profit / 2)}."
        )
    if kind == "capital-protect":
        return f"Withdraw all profit as income. Made {prof}? Take it home -> invest {fmt(balance - profit)}."
    if kind == "take-salary":
        salary = strategy.salaryAmount
        return (
            f"Withdraw a fixed {fmt(salary)} each period as your salary. "
            f"Balance after: {fmt(max(0.0, balance - salary))}."
        )
    if kind == "custom":
        target = fmt(strategy.targetAmount)
        each = fmt(abs(per_period_amount))
        total = fmt(abs(per_period_amount) * periods)
        if per_period_amount >= 0:
            return f"To reach {target}, invest {each} each period ({total} total over {periods} periods)."
        return f"To reach {target}, withdraw {each} each period ({total} total over {periods} periods)."
    return ""
