"""
Error types raised by the verification flow.
Each carries the HTTP status it maps to; extra keyword arguments are merged
into the JSON error body.
"""


class PaymentVerificationError(Exception):
    status_code = 500

    def __init__(self, error, status_code=None, **extra):
        super().__init__(error)
        self.message = error
        if status_code is not None:
            self.status_code = status_code
        self.extra = extra

    def to_dict(self):
        body = {"error": self.message}
        body.update({k: v for k, v in self.extra.items() if v is not None})
        return body


class AuthenticationError(PaymentVerificationError):
    status_code = 401


class AuthorizationError(PaymentVerificationError):
    status_code = 403


class ValidationError(PaymentVerificationError):
    status_code = 400


class SignatureError(PaymentVerificationError):
    status_code = 400


class ConfigurationError(PaymentVerificationError):
    status_code = 500


class NotFoundError(PaymentVerificationError):
    status_code = 404


class ConflictError(PaymentVerificationError):
    status_code = 409


class PersistenceError(PaymentVerificationError):
    status_code = 500
