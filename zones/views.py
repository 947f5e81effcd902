from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from .serializers import ZoneCreateSerializer, ZoneUpdateSerializer, zone_to_dict
from .utils import create_zone, delete_zone, get_zone, list_zones, update_zone


class ZoneListView(APIView):
    def get(self, request):
        return Response([zone_to_dict(zone) for zone in list_zones()])

    def post(self, request):
        serializer = ZoneCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        zone = create_zone(**serializer.validated_data)
        return Response(zone_to_dict(zone), status=status.HTTP_201_CREATED)


class ZoneDetailView(APIView):
    def get(self, request, zona_id):
        return Response(zone_to_dict(get_zone(zona_id)))

    def patch(self, request, zona_id):
        serializer = ZoneUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        zone = update_zone(zona_id, **serializer.validated_data)
        return Response(zone_to_dict(zone))

    def delete(self, request, zona_id):
        return Response(delete_zone(zona_id))
