from django.urls import path

from orders import views

app_name = "orders"

urlpatterns = [
    path("", views.OrderListView.as_view(), name="order_list"),
    path("<int:pedido_id>/", views.OrderDetailView.as_view(), name="order_detail"),
    # Order lines
    path("<int:pedido_id>/itens/", views.OrderItemListView.as_view(), name="order_item_list"),
    path(
        "<int:pedido_id>/itens/<str:codigo>/",
        views.OrderItemDetailView.as_view(),
        name="order_item_detail",
    ),
]
