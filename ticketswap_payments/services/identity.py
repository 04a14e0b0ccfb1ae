"""
Bearer tokens come from the auth provider and are verified locally by
flask-jwt-extended. Email confirmation is read from the token claims.
"""

from flask import jsonify, request

NO_AUTH_HEADER = "No authorization header provided"
INVALID_TOKEN = "Invalid or expired token"


def is_email_confirmed(claims):
    if claims.get("email_confirmed_at"):
        return True
    if claims.get("email_verified") is True:
        return True
    metadata = claims.get("user_metadata") or {}
    return metadata.get("email_verified") is True


def init_jwt_callbacks(jwt):
    @jwt.unauthorized_loader
    def missing_token(reason):
        # A header that is present but unusable is an invalid token, not a missing one
        if request.headers.get("Authorization"):
            return jsonify({"error": INVALID_TOKEN}), 401
        return jsonify({"error": NO_AUTH_HEADER}), 401

    @jwt.invalid_token_loader
    def invalid_token(reason):
        return jsonify({"error": INVALID_TOKEN}), 401

    @jwt.expired_token_loader
    def expired_token(jwt_header, jwt_payload):
        return jsonify({"error": INVALID_TOKEN}), 401
