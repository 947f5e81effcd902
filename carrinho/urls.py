from django.urls import path

from . import views

app_name = "carrinho"

urlpatterns = [
    path("", views.CartView.as_view(), name="cart"),
    path("itens/", views.CartItemListView.as_view(), name="cart_item_list"),
    path("itens/<str:codigo>/", views.CartItemDetailView.as_view(), name="cart_item_detail"),
    path("entrega/", views.CartDeliveryView.as_view(), name="cart_delivery"),
    path("cliente/", views.CartCustomerView.as_view(), name="cart_customer"),
    path("checkout/", views.CartCheckoutView.as_view(), name="cart_checkout"),
]
