"""
Seller Payout Model — what the seller is owed, settled out of band over UPI.
Status: pending | processing | paid | failed
"""

import uuid
from datetime import datetime, timezone
from ticketswap_payments.extensions import db


class SellerPayout(db.Model):
    __tablename__ = "seller_payouts"

    id = db.Column(
        db.String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4())
    )
    transaction_id = db.Column(db.String(36), db.ForeignKey("transactions.id"), nullable=False)
    seller_id = db.Column(db.String(64), nullable=False)
    amount = db.Column(db.Numeric(10, 2), nullable=False)
    status = db.Column(db.String(20), nullable=False, default="pending")
    payment_method = db.Column(db.String(20), nullable=False, default="upi")
    created_at = db.Column(
        db.DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc)
    )

    def to_dict(self):
        return {
            "id":             self.id,
            "transaction_id": self.transaction_id,
            "seller_id":      self.seller_id,
            "amount":         float(self.amount),
            "status":         self.status,
            "payment_method": self.payment_method,
            "created_at":     self.created_at.isoformat(),
        }
