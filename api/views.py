"""
REST API views exposing upvote milestones and popularity tiers.

These endpoints are read-only calculations over a vote count; no vote is
stored here.
"""
import logging

from django.utils.decorators import method_decorator
from django_ratelimit.decorators import ratelimit
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from rest_framework.permissions import AllowAny

from products.exceptions import InvalidArgumentError
from products.milestone_constants import VOTE_BADGE_TIERS
from products.services.milestone_service import compute_milestone_progress, get_milestone_summary
from products.services.upvote_service import UpvoteState, toggle_upvote
from products.services.vote_badge_service import get_vote_tier
from .serializers import (
    MilestoneProgressSerializer, BadgeTierSerializer, VoteTierSerializer, UpvoteToggleSerializer,
)

logger = logging.getLogger(__name__)


class MilestoneView(APIView):
    """
    GET /api/v1/milestones/<count>/
    GET /api/v1/milestones/?count=<count>

    Milestone progress, achievement badge and popularity tier for a vote count.
    """
    permission_classes = [AllowAny]
    authentication_classes = []

    def get(self, request, count=None):
        if count is None:
            raw = request.query_params.get('count')
            if raw is None:
                return Response({'error': 'count is required.'}, status=status.HTTP_400_BAD_REQUEST)
            try:
                count = int(raw)
            except ValueError:
                logger.warning(f"Milestone lookup with non-integer count: {raw!r}")
                return Response({'error': f"Invalid count: {raw!r}"}, status=status.HTTP_400_BAD_REQUEST)

        try:
            summary = get_milestone_summary(count)
            tier = get_vote_tier(count)
        except InvalidArgumentError as e:
            logger.warning(f"Milestone lookup rejected: {e}")
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response({
            'count': summary['count'],
            'progress': MilestoneProgressSerializer(summary['progress']).data,
            'badge': BadgeTierSerializer(summary['badge']).data if summary['badge'] else None,
            'vote_tier': VoteTierSerializer(tier).data,
        })


class VoteTierListView(APIView):
    """
    GET /api/v1/vote-tiers/

    The popularity tier table, lowest first.
    """
    permission_classes = [AllowAny]
    authentication_classes = []

    def get(self, request):
        return Response({'tiers': VoteTierSerializer(VOTE_BADGE_TIERS, many=True).data})


class UpvoteToggleView(APIView):
    """
    POST /api/v1/upvote-toggle/
    Body: {"upvotes": int, "is_upvoted": bool}

    Returns the optimistic state after the viewer clicks the upvote button,
    along with the milestone progress for the new count.
    """
    permission_classes = [AllowAny]
    authentication_classes = []

    @method_decorator(ratelimit(key='ip', rate='120/m', method='POST', block=True))
    def post(self, request):
        serializer = UpvoteToggleSerializer(data=request.data)
        if not serializer.is_valid():
            logger.warning(f"Upvote toggle serializer errors: {serializer.errors}")
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        state = toggle_upvote(UpvoteState(**serializer.validated_data))
        return Response({
            'upvotes': state.upvotes,
            'is_upvoted': state.is_upvoted,
            'progress': MilestoneProgressSerializer(compute_milestone_progress(state.upvotes)).data,
        })
