import razorpay
from razorpay.errors import SignatureVerificationError
from ticketswap_payments.errors import SignatureError


def verify_payment_signature(razorpay_order_id, razorpay_payment_id, razorpay_signature, key_id, key_secret):
    """
    Check the checkout signature: HMAC-SHA256 of "<order_id>|<payment_id>"
    keyed with the account secret.
    """
    client = razorpay.Client(auth=(key_id or "", key_secret))
    try:
        client.utility.verify_payment_signature({
            "razorpay_order_id": razorpay_order_id,
            "razorpay_payment_id": razorpay_payment_id,
            "razorpay_signature": razorpay_signature,
        })
    except (SignatureVerificationError, TypeError):
        # TypeError: hmac.compare_digest rejects non-ASCII strings
        raise SignatureError("Invalid payment signature")
