import logging
from decimal import Decimal
from django.db import transaction
from django.db.models import F
from .models import Wallet, WalletTransaction

logger = logging.getLogger(__name__)


# ======================================================
# INTERNAL
# ======================================================
def _get_wallet_for_update(user):
    Wallet.objects.get_or_create(user=user)
    return Wallet.objects.select_for_update().get(user=user)


# ======================================================
# PRIZE PAYOUT
# ======================================================
@transaction.atomic
def credit_prize(user, amount: Decimal, reference: str, **meta):
    if amount < 0:
        raise ValueError("Invalid prize amount")

    wallet = _get_wallet_for_update(user)
    wallet.balance = F("balance") + amount
    wallet.save(update_fields=["balance", "updated_at"])

    tx = WalletTransaction.objects.create(
        user=user,
        amount=amount,
        tx_type=WalletTransaction.CREDIT,
        reference=reference,
        meta={"reason": "game_prize", **meta},
    )

    logger.info(f"Credited {amount} to wallet of user {user.pk} ({reference})")
    return tx
