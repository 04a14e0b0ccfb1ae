from ticketswap_payments.models.ticket import Ticket
from ticketswap_payments.models.transaction import Transaction
from ticketswap_payments.models.payout import SellerPayout

__all__ = ["Ticket", "Transaction", "SellerPayout"]
