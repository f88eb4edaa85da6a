from rest_framework import status
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from clinic.authentication import PublicEndpointAuthentication
from clinic.models import Feedback
from clinic.serializers.feedback import FeedbackSerializer


@api_view(['GET', 'POST'])
@authentication_classes([PublicEndpointAuthentication])
@permission_classes([AllowAny])
def feedback(request):
    """Submit feedback or list all of it, newest first."""
    if request.method == 'POST':
        s = FeedbackSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        s.save()
        return Response(s.data, status=status.HTTP_201_CREATED)
    return Response(FeedbackSerializer(Feedback.objects.order_by('-date', '-id'), many=True).data)
