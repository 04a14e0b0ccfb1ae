import requests
from ticketswap_payments.logger import logger
from ticketswap_payments.services.sale_service import UNKNOWN_BUYER


def _api_key(config):
    # Service role first, anon key as a fallback
    return config.get("EXTERNAL_SUPABASE_SERVICE_ROLE_KEY") or config.get("EXTERNAL_SUPABASE_ANON_KEY")


def mirror_passenger_name(pnr_number, buyer_name, config):
    """
    Copy the buyer's name onto the matching ticket in the external store.
    Best effort: returns False instead of raising when skipped or failed.
    """
    base_url = config.get("EXTERNAL_SUPABASE_URL")
    api_key = _api_key(config)

    if not base_url or not api_key:
        logger.info("External ticket store not configured, skipping passenger sync")
        return False
    if not pnr_number:
        logger.info("Ticket has no PNR number, skipping passenger sync")
        return False

    url = f"{base_url.rstrip('/')}/rest/v1/{config.get('EXTERNAL_TICKETS_TABLE', 'tickets')}"
    try:
        response = requests.patch(
            url,
            params={"pnr_number": f"eq.{pnr_number}"},
            json={"passenger_name": buyer_name or UNKNOWN_BUYER},
            headers={
                "apikey": api_key,
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json",
                "Prefer": "return=minimal",
            },
            timeout=config.get("EXTERNAL_SYNC_TIMEOUT", 5),
        )
    except requests.RequestException as e:
        logger.error(f"Error calling external ticket store for PNR {pnr_number}: {e}")
        return False

    if not response.ok:
        logger.error(f"External ticket store returned {response.status_code} for PNR {pnr_number}: {response.text}")
        return False

    logger.info(f"Passenger name synced to external ticket store for PNR {pnr_number}")
    return True
