"""
Sale Service — Payment Service
Row-level reads and writes for a completed resale: the transaction record,
the ticket hand-over and the seller payout. Each write commits on its own.
"""

from datetime import datetime, timezone
from sqlalchemy.exc import SQLAlchemyError
from ticketswap_payments.errors import NotFoundError, PersistenceError
from ticketswap_payments.extensions import db
from ticketswap_payments.models import SellerPayout, Ticket, Transaction

UNKNOWN_BUYER = "Unknown Buyer"


def get_ticket(ticket_id):
    try:
        return Ticket.query.filter_by(id=ticket_id).first()
    except SQLAlchemyError as e:
        db.session.rollback()
        raise NotFoundError("Ticket not found", details=str(e)) from e


def create_transaction(ticket, buyer_id, settlement, razorpay_order_id, razorpay_payment_id):
    """
    Record the sale before anything else is touched.
    Money has already moved at the gateway, so this row is the one write
    the flow refuses to continue without.
    """
    transaction = Transaction(
        ticket_id=ticket.id,
        buyer_id=buyer_id,
        seller_id=ticket.seller_id,
        amount=settlement.amount,
        platform_fee=settlement.platform_fee,
        status="completed",
        payment_method="razorpay",
        razorpay_order_id=razorpay_order_id,
        razorpay_payment_id=razorpay_payment_id,
        escrow_status="held",
        completed_at=datetime.now(timezone.utc),
    )
    try:
        db.session.add(transaction)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        raise PersistenceError("Failed to create transaction record", details=str(e)) from e
    return transaction


def mark_ticket_sold(ticket_id, buyer_id, buyer_name):
    """
    Hand the ticket to the buyer.
    Only an 'available' ticket is updated; returns the number of rows changed,
    so 0 means another sale got there first.
    """
    try:
        updated = Ticket.query.filter_by(id=ticket_id, status="available").update(
            {
                "status": "sold",
                "buyer_id": buyer_id,
                "passenger_name": buyer_name or UNKNOWN_BUYER,
                "sold_at": datetime.now(timezone.utc),
            },
            synchronize_session=False,
        )
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        raise PersistenceError("Failed to update ticket", details=str(e)) from e
    return updated


def create_seller_payout(transaction_id, seller_id, amount):
    payout = SellerPayout(
        transaction_id=transaction_id,
        seller_id=seller_id,
        amount=amount,
        status="pending",
        payment_method="upi",
        created_at=datetime.now(timezone.utc),
    )
    try:
        db.session.add(payout)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        raise PersistenceError("Failed to create seller payout", details=str(e)) from e
    return payout
