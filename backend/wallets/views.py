from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from .models import Wallet, WalletTransaction


# ================================
# WALLET SUMMARY
# ================================
@api_view(["GET"])
@permission_classes([IsAuthenticated])
def wallet_summary(request):
    wallet, _ = Wallet.objects.get_or_create(user=request.user)

    transactions = (
        WalletTransaction.objects
        .filter(user=request.user)
        .order_by("-created_at")
        .values(
            "amount",
            "tx_type",
            "reference",
            "meta",
            "created_at",
        )[:50]
    )

    return Response({
        "wallet": {
            "balance": str(wallet.balance),
        },
        "transactions": list(transactions),
    })
