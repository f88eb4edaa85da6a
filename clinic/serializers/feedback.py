from rest_framework import serializers

from clinic.models import Doctor, Feedback
from clinic.serializers.auth import clean_text


class FeedbackSerializer(serializers.ModelSerializer):
    patient = serializers.CharField(max_length=128, required=False, allow_blank=True, default='')
    doctorId = serializers.PrimaryKeyRelatedField(
        source='doctor', queryset=Doctor.objects.all(), required=False, allow_null=True
    )
    rating = serializers.IntegerField(min_value=1, max_value=5)
    comment = serializers.CharField()

    class Meta:
        model = Feedback
        fields = ['id', 'patient', 'doctorId', 'rating', 'comment', 'date']
        read_only_fields = ['id', 'date']

    def validate_patient(self, v):
        return clean_text(v)

    def validate_comment(self, v):
        v = clean_text(v)
        if not v:
            raise serializers.ValidationError('Comment is required')
        return v
