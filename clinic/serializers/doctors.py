from rest_framework import serializers

from clinic.models import Doctor
from clinic.serializers.auth import clean_text


class DoctorSerializer(serializers.ModelSerializer):
    rating = serializers.FloatField(min_value=0, max_value=5, required=False, default=4.5)
    reviews = serializers.IntegerField(min_value=0, required=False, default=0)

    class Meta:
        model = Doctor
        fields = ['id', 'name', 'specialty', 'rating', 'reviews', 'location', 'availability', 'fee', 'image']
        read_only_fields = ['id']

    def validate_name(self, v):
        v = clean_text(v)
        if not v:
            raise serializers.ValidationError('Name is required')
        return v

    def validate_specialty(self, v):
        return clean_text(v)

    def validate_location(self, v):
        return clean_text(v)


class DoctorListQuerySerializer(serializers.Serializer):
    specialty = serializers.CharField(required=False, allow_blank=True)
    search = serializers.CharField(required=False, allow_blank=True)
