from django.urls import path

from . import views

app_name = "zones"

urlpatterns = [
    path("", views.ZoneListView.as_view(), name="zone_list"),
    path("<int:zona_id>/", views.ZoneDetailView.as_view(), name="zone_detail"),
]
