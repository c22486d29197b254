"""
Etsy Payout Report
Reconciles Etsy payment-statement CSVs and prints where every order's money is.

Usage:
    etsy-payouts-report                          # every CSV in data/etsy_statements/
    etsy-payouts-report statements/ extra.csv    # files and/or folders
    etsy-payouts-report --today 2026-03-10       # pin "today" for pending/paid
    etsy-payouts-report --export out/            # also write orders/deposits/misc CSVs
"""

import argparse
import os
import sys
from datetime import date

import pandas as pd

from etsy_payouts.config import load_settings, configure_logging
from etsy_payouts.formatting import money, short_date
from etsy_payouts.models import OrderStatus, STATUS_LABELS, StatementError
from etsy_payouts.pipeline import collect_statement_paths, process_statement_files

# Export headers are written even when a section has no rows
ORDER_COLUMNS = [
    "Order", "Date", "Item", "Sale Amount", "Fees", "Taxes", "Net", "Status",
    "Availability Date", "Paid Out Date", "Reserve Amount", "Transactions",
]
DEPOSIT_COLUMNS = ["Date", "Amount", "Description"]
MISC_COLUMNS = ["Date", "Type", "Title", "Info", "Amount", "Fees & Taxes", "Net"]


def _banner(title):
    print("\n" + "=" * 70)
    print(title)
    print("=" * 70)


def print_report(result, files):
    s = result.summary

    _banner("ETSY PAYOUT SUMMARY")
    print(f"\nFiles processed: {len(files)}")
    for f in files:
        print(f"  - {os.path.basename(f)}")
    print(f"\nTransactions: {len(result.all_transactions)}  |  "
          f"Orders: {s.orders_count}  |  Deposits: {len(result.deposits)}  |  "
          f"Misc: {len(result.misc_transactions)}")

    _banner("FINANCIAL SUMMARY")
    print(f"\nTOTAL SALES (after tax):  {money(s.total_sales):>14}")
    print(f"  Fees:                   {money(s.total_fees):>14}")
    print(f"  Taxes:                  {money(s.total_taxes):>14}")
    print(f"NET REVENUE:              {money(s.net_revenue):>14}")
    print(f"\nTOTAL DEPOSITED:          {money(s.total_deposits):>14}  ({s.paid_out_orders_count} orders paid)")
    print(f"CURRENT BALANCE:          {money(s.current_balance):>14}  ({s.current_balance_orders_count} orders)")
    print(f"  In reserve:             {money(s.reserve_amount):>14}  ({s.reserve_orders_count} orders)")
    print(f"AVAILABLE FOR DEPOSIT:    {money(s.available_for_deposit):>14}")

    _banner("ORDERS BY STATUS")
    for status in (OrderStatus.PENDING, OrderStatus.RESERVE, OrderStatus.CURRENT_BALANCE,
                   OrderStatus.PAID, OrderStatus.REFUNDED):
        group = [o for o in result.orders if o.status is status]
        if not group:
            continue
        print(f"\n{STATUS_LABELS[status]} ({len(group)}):")
        for o in group:
            when = ""
            if o.paid_out_date:
                when = f"paid {short_date(o.paid_out_date)}"
            elif o.availability_date:
                when = f"available {short_date(o.availability_date)}"
            print(f"  #{o.order_number:<12} {short_date(o.date):<13} "
                  f"{money(o.net_amount):>11}  {o.item_title[:30]:<30} {when}")

    if result.deposits:
        _banner("DEPOSITS")
        for d in result.deposits:
            print(f"  {short_date(d.date):<13} {money(d.amount):>11}")


def export_result(result, out_dir):
    """Write orders, deposits and misc transactions as CSVs into ``out_dir``."""
    os.makedirs(out_dir, exist_ok=True)

    orders_df = pd.DataFrame([{
        "Order": o.order_number,
        "Date": o.date.isoformat(),
        "Item": o.item_title,
        "Sale Amount": o.sale_amount,
        "Fees": o.total_fees,
        "Taxes": o.total_taxes,
        "Net": o.net_amount,
        "Status": o.status.value,
        "Availability Date": o.availability_date.isoformat() if o.availability_date else "",
        "Paid Out Date": o.paid_out_date.isoformat() if o.paid_out_date else "",
        "Reserve Amount": o.reserve_amount if o.reserve_amount is not None else "",
        "Transactions": len(o.transactions),
    } for o in result.orders], columns=ORDER_COLUMNS)
    deposits_df = pd.DataFrame([{
        "Date": d.date.isoformat(), "Amount": d.amount, "Description": d.description,
    } for d in result.deposits], columns=DEPOSIT_COLUMNS)
    misc_df = pd.DataFrame([{
        "Date": t.date.isoformat(), "Type": t.kind, "Title": t.title, "Info": t.info,
        "Amount": t.amount, "Fees & Taxes": t.fees, "Net": t.net,
    } for t in result.misc_transactions], columns=MISC_COLUMNS)

    written = []
    for name, df in (("orders.csv", orders_df), ("deposits.csv", deposits_df),
                     ("misc_transactions.csv", misc_df)):
        path = os.path.join(out_dir, name)
        df.to_csv(path, index=False)
        written.append(path)
    return written


def build_parser():
    parser = argparse.ArgumentParser(
        prog="etsy-payouts-report",
        description="Reconcile Etsy payment statements into orders, deposits and balances.",
    )
    parser.add_argument("paths", nargs="*",
                        help="statement CSV files or folders (default: ETSY_PAYOUTS_STATEMENTS_DIR)")
    parser.add_argument("--today", type=date.fromisoformat, default=None,
                        help="date to treat as today, YYYY-MM-DD")
    parser.add_argument("--export", metavar="DIR", default=None,
                        help="write orders.csv, deposits.csv, misc_transactions.csv to DIR")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    settings = load_settings()
    configure_logging(settings.log_level)

    files = collect_statement_paths(args.paths or [settings.statements_dir])
    if not files:
        print("No statement CSVs found. Pass files or folders, or set ETSY_PAYOUTS_STATEMENTS_DIR.")
        return 1

    try:
        result = process_statement_files(files, today=args.today)
    except StatementError as e:
        print(f"ERROR: could not process statements ({e})")
        return 1

    print_report(result, files)

    if args.export:
        print()
        for path in export_result(result, args.export):
            print(f"Saved: {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
