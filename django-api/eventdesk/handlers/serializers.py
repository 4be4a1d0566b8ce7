"""Serializers for the presentation boundary.

Output serializers turn domain models into JSON; input serializers check
the shape of intent bodies. Field content is validated by the remote API.
"""

from rest_framework import serializers


class EventSerializer(serializers.Serializer):
    """Serializer for EventRecord domain model."""

    id = serializers.CharField(source="id.value")
    name = serializers.CharField()
    description = serializers.CharField(allow_blank=True)


class NotificationSerializer(serializers.Serializer):
    """Serializer for Notification domain model."""

    title = serializers.CharField()
    kind = serializers.CharField(source="kind.value")
    message = serializers.CharField(allow_blank=True)
    duration_ms = serializers.IntegerField()
    closable = serializers.BooleanField()


class ReadModelSerializer(serializers.Serializer):
    """Serializer for ReadModel domain model."""

    is_authenticated = serializers.BooleanField()
    events = EventSerializer(many=True)
    edit_target = EventSerializer(allow_null=True)
    modal_visible = serializers.BooleanField()
    modal_title = serializers.CharField()
    submit_label = serializers.CharField()
    form = serializers.DictField(child=serializers.CharField(allow_blank=True))


class RegisterSerializer(serializers.Serializer):
    username = serializers.CharField(allow_blank=True, trim_whitespace=False)
    email = serializers.CharField(allow_blank=True, trim_whitespace=False)
    password = serializers.CharField(allow_blank=True, trim_whitespace=False)


class LoginSerializer(serializers.Serializer):
    identifier = serializers.CharField(allow_blank=True, trim_whitespace=False)
    password = serializers.CharField(allow_blank=True, trim_whitespace=False)


class EventFormSerializer(serializers.Serializer):
    name = serializers.CharField(allow_blank=True, trim_whitespace=False)
    description = serializers.CharField(
        allow_blank=True, trim_whitespace=False, required=False, default=""
    )
