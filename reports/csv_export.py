"""
CSV rendering for investor and payout reports.

Rows are written in the order they are passed in, after a header row that is
always present. Escaping is the csv module's QUOTE_MINIMAL: a field holding a
comma, quote or newline is wrapped in double quotes with inner quotes doubled.
"""
import csv
import io

from django.http import HttpResponse

INVESTOR_HEADERS = [
    "Name", "Email", "Phone Number", "Invested Amount",
    "Investment Date", "Investment Type", "Return Percentage",
    "Monthly Payout", "UPI Transaction ID", "Total Paid Out",
    "Status", "Notes", "Created At", "Updated At",
]

PAYOUT_HEADERS = [
    "User Name", "Email", "Phone", "Invested Amount", "Monthly Payout",
    "Paid Month", "Status", "Date Paid", "Notes",
]


def _cell(value):
    if value is None:
        return ""
    if hasattr(value, 'isoformat'):
        return value.isoformat()
    return str(value)


def render_csv(headers, rows):
    """Render a header and an iterable of row sequences to CSV text"""
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
    writer.writerow(headers)
    for row in rows:
        writer.writerow([_cell(value) for value in row])
    return buffer.getvalue()


def investor_rows(investments):
    for inv in investments:
        yield [
            inv.name,
            inv.email,
            inv.phone_number,
            inv.invested_amount,
            inv.investment_date,
            inv.investment_type,
            inv.return_percentage,
            inv.monthly_payout,
            inv.upi_transaction_id,
            inv.total_paid_out,
            inv.status,
            inv.notes,
            inv.created_at,
            inv.updated_at,
        ]


def payout_rows(payouts):
    for payout in payouts:
        investment = payout.investment
        yield [
            investment.name,
            investment.email,
            investment.phone_number,
            investment.invested_amount,
            payout.payout_amount,
            payout.month_year,
            payout.status,
            payout.date_paid,
            payout.notes,
        ]


def export_investors_csv(investments):
    return render_csv(INVESTOR_HEADERS, investor_rows(investments))


def export_payouts_csv(payouts):
    return render_csv(PAYOUT_HEADERS, payout_rows(payouts))


def csv_response(content, filename):
    """Wrap CSV text in a download response"""
    response = HttpResponse(content, content_type='text/csv; charset=utf-8')
    response['Content-Disposition'] = f'attachment; filename="{filename}"'
    return response
