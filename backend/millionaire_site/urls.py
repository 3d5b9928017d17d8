from django.contrib import admin
from django.urls import path, include


urlpatterns = [
    path('admin-panel/', admin.site.urls),

    # Core / Accounts
    path('api/accounts/', include('accounts.urls')),
    path('api/wallet/', include('wallets.urls')),

    # Game
    path('api/games/', include('millionaire.urls')),
]
