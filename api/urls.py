from django.urls import path
from .views import MilestoneView, VoteTierListView, UpvoteToggleView

app_name = 'api'

urlpatterns = [
    path('milestones/', MilestoneView.as_view(), name='milestones'),
    path('milestones/<int:count>/', MilestoneView.as_view(), name='milestones-detail'),
    path('vote-tiers/', VoteTierListView.as_view(), name='vote-tiers'),
    path('upvote-toggle/', UpvoteToggleView.as_view(), name='upvote-toggle'),
]
