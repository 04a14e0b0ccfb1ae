"""
Transaction Model — authoritative record of a completed sale.
Escrow: held until the seller payout settles.
"""

import uuid
from datetime import datetime, timezone
from ticketswap_payments.extensions import db


class Transaction(db.Model):
    __tablename__ = "transactions"

    id = db.Column(
        db.String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4())
    )
    ticket_id = db.Column(db.String(64), db.ForeignKey("tickets.id"), nullable=False)
    buyer_id = db.Column(db.String(64), nullable=True)
    seller_id = db.Column(db.String(64), nullable=False)
    amount = db.Column(db.Numeric(10, 2), nullable=False)
    platform_fee = db.Column(db.Numeric(10, 2), nullable=False)
    status = db.Column(db.String(20), nullable=False, default="completed")
    payment_method = db.Column(db.String(20), nullable=False, default="razorpay")
    razorpay_order_id = db.Column(db.String(64), nullable=True)
    razorpay_payment_id = db.Column(db.String(64), nullable=True)
    escrow_status = db.Column(db.String(20), nullable=False, default="held")
    created_at = db.Column(
        db.DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc)
    )
    completed_at = db.Column(db.DateTime(timezone=True), nullable=True)

    def to_dict(self):
        return {
            "id":                  self.id,
            "ticket_id":           self.ticket_id,
            "buyer_id":            self.buyer_id,
            "seller_id":           self.seller_id,
            "amount":              float(self.amount),
            "platform_fee":        float(self.platform_fee),
            "status":              self.status,
            "payment_method":      self.payment_method,
            "razorpay_order_id":   self.razorpay_order_id,
            "razorpay_payment_id": self.razorpay_payment_id,
            "escrow_status":       self.escrow_status,
            "completed_at":        self.completed_at.isoformat() if self.completed_at else None,
        }
