from rest_framework import serializers


class MilestoneProgressSerializer(serializers.Serializer):
    previous_milestone = serializers.IntegerField()
    current_milestone = serializers.IntegerField()
    progress_percent = serializers.FloatField()
    is_complete = serializers.BooleanField()


class BadgeTierSerializer(serializers.Serializer):
    milestone = serializers.IntegerField()
    tier_group = serializers.CharField()
    level = serializers.IntegerField()
    achieved_count = serializers.IntegerField()
    name = serializers.CharField()
    icon = serializers.CharField()
    color = serializers.CharField()


class VoteTierSerializer(serializers.Serializer):
    min = serializers.IntegerField()
    max = serializers.IntegerField(allow_null=True)
    name = serializers.CharField()
    icon = serializers.CharField()
    emoji = serializers.CharField()
    color = serializers.CharField()


class UpvoteToggleSerializer(serializers.Serializer):
    upvotes = serializers.IntegerField(min_value=0)
    is_upvoted = serializers.BooleanField()
