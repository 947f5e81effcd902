from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/zonas/", include("zones.urls")),
    path("api/itens/", include("catalog.urls")),
    path("api/clientes/", include("customer.urls")),
    path("api/pedidos/", include("orders.urls")),
    path("api/", include("management.urls")),
    path("carrinho/", include("carrinho.urls")),
]
