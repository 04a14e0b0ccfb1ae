"""
Payment Routes — Razorpay checkout confirmation
Handles POST /verify-razorpay-payment (alias POST /api/payments/verify)
Records the sale, hands the ticket to the buyer and queues the seller payout.
"""

from flask import Blueprint, current_app, jsonify, request
from flask_jwt_extended import get_jwt, get_jwt_identity, jwt_required
from ticketswap_payments.errors import (
    AuthorizationError,
    ConfigurationError,
    ConflictError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from ticketswap_payments.logger import logger
from ticketswap_payments.services.identity import is_email_confirmed
from ticketswap_payments.services.mirror_client import mirror_passenger_name
from ticketswap_payments.services.sale_service import (
    create_seller_payout,
    create_transaction,
    get_ticket,
    mark_ticket_sold,
)
from ticketswap_payments.services.settlement import calculate_settlement
from ticketswap_payments.services.signature import verify_payment_signature

payments_bp = Blueprint("payments", __name__)

REQUIRED_FIELDS = ["razorpay_payment_id", "razorpay_order_id", "razorpay_signature", "ticketId"]


@payments_bp.before_request
def require_jwt_secret():
    # Without a signing key every presented token would fail to decode
    if request.method == "OPTIONS" or not request.headers.get("Authorization"):
        return None
    if not current_app.config.get("JWT_SECRET_KEY"):
        raise ConfigurationError("Authentication not configured")
    return None


@payments_bp.route("/verify-razorpay-payment", methods=["POST", "OPTIONS"])
@payments_bp.route("/api/payments/verify", methods=["POST", "OPTIONS"])
@jwt_required()
def verify_razorpay_payment():
    """
    Verify a Razorpay payment and complete the ticket sale
    ---
    tags:
      - Payments
    security:
      - Bearer: []
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required:
            - razorpay_payment_id
            - razorpay_order_id
            - razorpay_signature
            - ticketId
          properties:
            razorpay_payment_id:
              type: string
            razorpay_order_id:
              type: string
            razorpay_signature:
              type: string
            ticketId:
              type: string
            buyer_id:
              type: string
            buyer_name:
              type: string
    responses:
      200:
        description: Payment verified, ticket sold
      204:
        description: CORS preflight
      400:
        description: Missing fields or invalid signature
      401:
        description: Missing or invalid token
      403:
        description: Email not verified
      404:
        description: Ticket not found
      409:
        description: Ticket already sold
      500:
        description: Server misconfigured or transaction not recorded
    """
    # Preflight is exempt from the JWT check
    if request.method == "OPTIONS":
        return "", 204

    if not is_email_confirmed(get_jwt()):
        raise AuthorizationError(
            "Email verification required",
            message="Please verify your email before purchasing tickets",
        )

    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}

    missing = [f for f in REQUIRED_FIELDS if not data.get(f)]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(REQUIRED_FIELDS)}", missing=missing)

    payment_id = data["razorpay_payment_id"]
    order_id = data["razorpay_order_id"]
    ticket_id = data["ticketId"]
    buyer_id = data.get("buyer_id") or get_jwt_identity()
    buyer_name = data.get("buyer_name")

    config = current_app.config
    if not config.get("RAZORPAY_KEY_SECRET"):
        raise ConfigurationError("Razorpay credentials not configured")

    verify_payment_signature(
        order_id,
        payment_id,
        data["razorpay_signature"],
        config.get("RAZORPAY_KEY_ID"),
        config["RAZORPAY_KEY_SECRET"],
    )
    logger.info(f"Signature verified for order {order_id}, payment {payment_id}, ticket {ticket_id}")

    if not config.get("SQLALCHEMY_DATABASE_URI"):
        raise ConfigurationError("Database configuration missing")

    ticket = get_ticket(ticket_id)
    if not ticket:
        logger.warning(f"No ticket found with ID {ticket_id}")
        raise NotFoundError("Ticket not found")
    if ticket.status != "available":
        raise ConflictError("Ticket is no longer available", details=ticket.status)

    seller_id = ticket.seller_id
    pnr_number = ticket.pnr_number
    settlement = calculate_settlement(ticket.selling_price)

    transaction = create_transaction(ticket, buyer_id, settlement, order_id, payment_id)
    transaction_id = transaction.id
    logger.info(f"Transaction {transaction_id} recorded for ticket {ticket_id}")

    # Everything below is bookkeeping: failures are logged, the sale stands
    try:
        updated = mark_ticket_sold(ticket_id, buyer_id, buyer_name)
    except PersistenceError as e:
        logger.error(f"Ticket update error for {ticket_id}: {e.extra.get('details')}")
        updated = None

    if updated == 0:
        logger.warning(f"Ticket {ticket_id} was sold concurrently; transaction {transaction_id} needs a refund")
        raise ConflictError("Ticket is no longer available", transaction_id=transaction_id)

    mirror_passenger_name(pnr_number, buyer_name, config)

    try:
        create_seller_payout(transaction_id, seller_id, settlement.seller_amount)
    except PersistenceError as e:
        logger.error(f"Payout creation error for transaction {transaction_id}: {e.extra.get('details')}")

    return jsonify({
        "success": True,
        "message": "Payment verified successfully",
        "transaction": {
            "id": transaction_id,
            "amount": float(settlement.amount),
            "platformCommission": float(settlement.platform_fee),
            "sellerAmount": float(settlement.seller_amount),
            "status": "completed",
        },
        "ticket": {
            "id": ticket_id,
            "status": "sold",
        },
    }), 200
