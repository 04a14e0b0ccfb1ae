"""
CORS: reflect the request Origin when it is allow-listed, otherwise answer
with the primary frontend origin.
"""

from flask import request

ALLOWED_METHODS = "POST, GET, OPTIONS"
ALLOWED_HEADERS = (
    "Content-Type, Authorization, x-client-info, apikey, x-requested-with, "
    "x-razorpay-signature, x-supabase-auth"
)


def build_cors_headers(origin, allowed_origins):
    allow_origin = origin if origin in allowed_origins else allowed_origins[0]
    return {
        "Access-Control-Allow-Origin": allow_origin,
        "Vary": "Origin",
        "Access-Control-Allow-Methods": ALLOWED_METHODS,
        "Access-Control-Allow-Headers": ALLOWED_HEADERS,
        "Access-Control-Allow-Credentials": "true",
        "Access-Control-Max-Age": "86400",
    }


def init_cors(app):
    @app.after_request
    def add_cors_headers(response):
        headers = build_cors_headers(
            request.headers.get("Origin", ""),
            app.config["CORS_ALLOWED_ORIGINS"],
        )
        for key, value in headers.items():
            response.headers[key] = value
        return response
