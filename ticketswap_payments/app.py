"""
Payment Service — Razorpay confirmation for ticket resales
Verifies the checkout, records the sale and queues the seller payout.
"""

import os
import traceback
from flask import Flask, jsonify
from flasgger import Swagger
from werkzeug.exceptions import HTTPException
from ticketswap_payments.config import Config
from ticketswap_payments.cors import init_cors
from ticketswap_payments.errors import PaymentVerificationError
from ticketswap_payments.extensions import db, jwt
from ticketswap_payments.logger import logger
from ticketswap_payments.services.identity import init_jwt_callbacks
from ticketswap_payments.models import SellerPayout, Ticket, Transaction  # noqa: F401  (register models)


def create_app(config=None):
    app = Flask(__name__)

    # Configuration
    app.config.from_object(Config)
    if config:
        app.config.update(config)

    # Initialize Extensions
    if app.config.get("SQLALCHEMY_DATABASE_URI"):
        db.init_app(app)
    else:
        logger.warning("No database configured; payment verification will fail until DATABASE_URL is set")

    if not app.config.get("JWT_SECRET_KEY"):
        logger.warning("No JWT secret configured; bearer tokens will be rejected until JWT_SECRET is set")
    jwt.init_app(app)
    init_jwt_callbacks(jwt)
    init_cors(app)

    Swagger(app, config={
        "headers": [],
        "specs": [
            {
                "endpoint": "apispec_1",
                "route": "/apispec_1.json",
                "rule_filter": lambda rule: True,  # all in
                "model_filter": lambda tag: True,  # all in
            }
        ],
        "static_url_path": "/flasgger_static",
        "swagger_ui": True,
        "specs_route": "/apidocs/",
    })

    # Register Blueprints
    from ticketswap_payments.routes.payment_routes import payments_bp
    app.register_blueprint(payments_bp)

    @app.errorhandler(PaymentVerificationError)
    def handle_verification_error(error):
        logger.warning(f"Payment verification rejected ({error.status_code}): {error.message}")
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        if isinstance(error, HTTPException):
            return jsonify({"error": error.description}), error.code

        logger.exception(f"Error verifying Razorpay payment: {error}")
        body = {
            "error": "Internal server error while verifying payment",
            "details": str(error),
        }
        if app.config.get("EXPOSE_ERROR_STACK"):
            body["stack"] = traceback.format_exc()
        return jsonify(body), 500

    @app.route("/health")
    def health():
        if not app.config.get("SQLALCHEMY_DATABASE_URI"):
            return {"service": "payment-service", "status": "unhealthy", "error": "database not configured"}, 503
        try:
            db.session.execute(db.text("SELECT 1"))
            return {"service": "payment-service", "status": "healthy"}, 200
        except Exception as e:
            return {"service": "payment-service", "status": "unhealthy", "error": str(e)}, 503

    return app


if __name__ == "__main__":
    app = create_app()
    app.run(host="0.0.0.0", port=int(os.environ.get("PORT", 5004)))
