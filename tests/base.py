import hashlib
import hmac
import os
import tempfile
import unittest
from flask_jwt_extended import create_access_token
from ticketswap_payments.app import create_app
from ticketswap_payments.extensions import db
from ticketswap_payments.models import Ticket

RAZORPAY_SECRET = "rzp_test_secret"
CONFIRMED_AT = "2024-01-01T00:00:00Z"


def sign(order_id, payment_id, secret=RAZORPAY_SECRET):
    return hmac.new(secret.encode(), f"{order_id}|{payment_id}".encode(), hashlib.sha256).hexdigest()


class PaymentServiceTestCase(unittest.TestCase):
    extra_config = {}

    def setUp(self):
        fd, self.db_path = tempfile.mkstemp(suffix=".db")
        os.close(fd)

        config = {
            "TESTING": True,
            "SQLALCHEMY_DATABASE_URI": f"sqlite:///{self.db_path}",
            "JWT_SECRET_KEY": "test-jwt-secret-with-enough-length-for-hs256",
            "RAZORPAY_KEY_ID": "rzp_test_key",
            "RAZORPAY_KEY_SECRET": RAZORPAY_SECRET,
            "EXTERNAL_SUPABASE_URL": None,
            "EXTERNAL_SUPABASE_SERVICE_ROLE_KEY": None,
            "EXTERNAL_SUPABASE_ANON_KEY": None,
            "EXPOSE_ERROR_STACK": False,
        }
        config.update(self.extra_config)
        self.app = create_app(config)
        self.client = self.app.test_client()

        if self.app.config.get("SQLALCHEMY_DATABASE_URI"):
            with self.app.app_context():
                db.create_all()
                db.session.add(Ticket(id="T1", selling_price=1000, seller_id="S1", pnr_number="PNR123"))
                db.session.commit()

    def tearDown(self):
        if self.app.config.get("SQLALCHEMY_DATABASE_URI"):
            with self.app.app_context():
                db.session.remove()
                db.drop_all()
                db.engine.dispose()
        os.remove(self.db_path)

    def token(self, identity="B1", confirmed=True, **claims):
        if confirmed:
            claims.setdefault("email_confirmed_at", CONFIRMED_AT)
        with self.app.app_context():
            return create_access_token(identity=identity, additional_claims=claims)

    def auth_headers(self, **kwargs):
        return {"Authorization": f"Bearer {self.token(**kwargs)}"}

    def payment_body(self, ticket_id="T1", order_id="o1", payment_id="p1", **overrides):
        body = {
            "razorpay_payment_id": payment_id,
            "razorpay_order_id": order_id,
            "razorpay_signature": sign(order_id, payment_id),
            "ticketId": ticket_id,
            "buyer_id": "B1",
            "buyer_name": "Alice",
        }
        body.update(overrides)
        return body

    def verify(self, body=None, headers=None, path="/verify-razorpay-payment"):
        return self.client.post(
            path,
            json=self.payment_body() if body is None else body,
            headers=self.auth_headers() if headers is None else headers,
        )
