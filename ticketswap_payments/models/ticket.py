"""
Ticket Model — listed by a seller, sold once through the payment flow.
Status: available | sold
"""

from datetime import datetime, timezone
from ticketswap_payments.extensions import db


class Ticket(db.Model):
    __tablename__ = "tickets"

    id = db.Column(db.String(64), primary_key=True)
    seller_id = db.Column(db.String(64), nullable=False)
    selling_price = db.Column(db.Numeric(10, 2), nullable=False)
    status = db.Column(db.String(20), nullable=False, default="available")
    buyer_id = db.Column(db.String(64), nullable=True)
    passenger_name = db.Column(db.Text, nullable=True)
    pnr_number = db.Column(db.String(32), nullable=True)  # key into the external ticket store
    sold_at = db.Column(db.DateTime(timezone=True), nullable=True)
    created_at = db.Column(
        db.DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc)
    )

    def to_dict(self):
        return {
            "id":             self.id,
            "seller_id":      self.seller_id,
            "selling_price":  float(self.selling_price),
            "status":         self.status,
            "buyer_id":       self.buyer_id,
            "passenger_name": self.passenger_name,
            "pnr_number":     self.pnr_number,
            "sold_at":        self.sold_at.isoformat() if self.sold_at else None,
        }
