import unittest
from tests.base import PaymentServiceTestCase


class TestCors(PaymentServiceTestCase):
    def test_preflight(self):
        resp = self.client.options(
            "/verify-razorpay-payment",
            headers={"Origin": "http://localhost:5173", "Access-Control-Request-Method": "POST"},
        )
        self.assertEqual(resp.status_code, 204)
        self.assertEqual(resp.headers["Access-Control-Allow-Origin"], "http://localhost:5173")
        self.assertEqual(resp.headers["Vary"], "Origin")
        self.assertEqual(resp.headers["Access-Control-Allow-Methods"], "POST, GET, OPTIONS")
        self.assertIn("Authorization", resp.headers["Access-Control-Allow-Headers"])
        self.assertIn("x-razorpay-signature", resp.headers["Access-Control-Allow-Headers"])
        self.assertEqual(resp.headers["Access-Control-Allow-Credentials"], "true")
        self.assertEqual(resp.headers["Access-Control-Max-Age"], "86400")

    def test_unknown_origin_falls_back_to_default(self):
        resp = self.client.options("/api/payments/verify", headers={"Origin": "https://evil.example"})
        self.assertEqual(resp.status_code, 204)
        self.assertEqual(resp.headers["Access-Control-Allow-Origin"], "https://ticket-swpper3.vercel.app")

    def test_error_responses_carry_cors_headers(self):
        resp = self.client.post(
            "/verify-razorpay-payment",
            json=self.payment_body(),
            headers={"Origin": "http://localhost:3000"},
        )
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.headers["Content-Type"], "application/json")
        self.assertEqual(resp.headers["Access-Control-Allow-Origin"], "http://localhost:3000")

    def test_success_response_carries_cors_headers(self):
        resp = self.client.post(
            "/verify-razorpay-payment",
            json=self.payment_body(),
            headers=dict(self.auth_headers(), Origin="https://ticket-swpper3.vercel.app"),
        )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.headers["Access-Control-Allow-Origin"], "https://ticket-swpper3.vercel.app")


class TestCustomOrigins(PaymentServiceTestCase):
    extra_config = {"CORS_ALLOWED_ORIGINS": ["https://resale.example"]}

    def test_configured_list(self):
        resp = self.client.options("/verify-razorpay-payment", headers={"Origin": "http://localhost:5173"})
        self.assertEqual(resp.headers["Access-Control-Allow-Origin"], "https://resale.example")


class TestHealth(PaymentServiceTestCase):
    def test_healthy(self):
        resp = self.client.get("/health")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.get_json(), {"service": "payment-service", "status": "healthy"})

    def test_unknown_route_is_json(self):
        resp = self.client.get("/nope")
        self.assertEqual(resp.status_code, 404)
        self.assertIn("error", resp.get_json())


if __name__ == "__main__":
    unittest.main()
