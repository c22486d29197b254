"""Value types shared by every pipeline stage."""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional


class StatementError(ValueError):
    """A statement file that can't be processed at all (bad header, not CSV)."""


class Kind:
    """Type labels as they appear in the export's Type column."""
    SALE = "Sale"
    FEE = "Fee"
    TAX = "Tax"
    DEPOSIT = "Deposit"
    BUYER_FEE = "Buyer Fee"
    REFUND = "Refund"
    OTHER = "Other"


RESERVE_APPLIED = "Reserve Applied"


class OrderStatus(str, Enum):
    UNRESOLVED = "unresolved"
    PENDING = "pending"
    RESERVE = "reserve"
    CURRENT_BALANCE = "current_balance"
    PAID = "paid"
    REFUNDED = "refunded"


STATUS_LABELS = {
    OrderStatus.PAID: "Paid Out",
    OrderStatus.CURRENT_BALANCE: "In Balance",
    OrderStatus.PENDING: "Pending",
    OrderStatus.REFUNDED: "Refunded",
    OrderStatus.RESERVE: "In Reserve",
    OrderStatus.UNRESOLVED: "Unresolved",
}


@dataclass(frozen=True)
class Transaction:
    date: date
    kind: str
    title: str
    info: str
    currency: str
    amount: float
    fees: float
    net: float
    tax_details: Optional[str] = None
    reserve_status: Optional[str] = None
    availability_date: Optional[date] = None
    order_number: Optional[str] = None
    listing_number: Optional[str] = None


@dataclass(frozen=True)
class Order:
    order_number: str
    date: date
    item_title: str
    sale_amount: float
    total_fees: float
    total_taxes: float
    net_amount: float
    transactions: tuple = ()
    availability_date: Optional[date] = None
    is_paid_out: bool = False
    paid_out_date: Optional[date] = None
    status: OrderStatus = OrderStatus.UNRESOLVED
    reserve_amount: Optional[float] = None


@dataclass(frozen=True)
class Deposit:
    date: date
    amount: float
    description: str


@dataclass(frozen=True)
class Summary:
    total_sales: float = 0.0
    total_fees: float = 0.0
    total_taxes: float = 0.0
    net_revenue: float = 0.0
    total_deposits: float = 0.0
    current_balance: float = 0.0
    reserve_amount: float = 0.0
    available_for_deposit: float = 0.0
    orders_count: int = 0
    paid_out_orders_count: int = 0
    current_balance_orders_count: int = 0
    reserve_orders_count: int = 0


@dataclass(frozen=True)
class StatementResult:
    """Everything the presentation layer gets to see."""
    orders: list = field(default_factory=list)
    deposits: list = field(default_factory=list)
    summary: Summary = field(default_factory=Summary)
    all_transactions: list = field(default_factory=list)
    misc_transactions: list = field(default_factory=list)
